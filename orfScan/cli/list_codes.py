""" `listCodes` prints the genetic code tables that can be selected with -c """
from __future__ import annotations
import argparse
import sys
from orfScan.codon_table import GeneticCode


# pylint: disable=W0212
def add_subparser_list_codes(subparsers:argparse._SubParsersAction):
    """ CLI for orfScan listCodes """
    p:argparse.ArgumentParser = subparsers.add_parser(
        name='listCodes',
        help='List the available genetic code tables.',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    p.set_defaults(func=list_codes)
    return p


def list_codes(args:argparse.Namespace) -> None:
    """ Print table ids and names """
    for code_id, name in GeneticCode.list_codes():
        marker = '' if code_id != 1 else ' (default)'
        sys.stdout.write(f"{code_id:>3}  {name}{marker}\n")
