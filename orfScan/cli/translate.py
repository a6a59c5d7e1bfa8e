""" `translate` scans nucleotide sequences in all six reading frames and writes
every open reading frame as a numbered, coordinate annotated protein FASTA. """
from __future__ import annotations
import argparse
import sys
from contextlib import ExitStack
from pathlib import Path
from orfScan import constant, err, get_logger
from orfScan.cli import common
from orfScan.emitter import FastaORFWriter, ORFEmitter
from orfScan.scanner import ORFScanner
from orfScan.seqio import open_sources


OUTPUT_FILE_FORMATS = ['.fa', '.fasta', '.faa']

# pylint: disable=W0212
def add_subparser_translate(subparsers:argparse._SubParsersAction):
    """ CLI for orfScan translate """
    p:argparse.ArgumentParser = subparsers.add_parser(
        name='translate',
        help='Translate all open reading frames of nucleotide sequences.',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    common.add_args_input_path(p)
    common.add_args_output_path(p, OUTPUT_FILE_FORMATS)
    common.add_args_translation(p)
    common.add_args_debug_level(p)

    p.set_defaults(func=translate)
    common.print_help_if_missing_args(p)
    return p


def translate(args:argparse.Namespace) -> None:
    """ Main entrypoint for six-frame translation """
    common.setup_logger(args)
    logger = get_logger()

    if args.output_path is not None:
        common.validate_file_format(
            args.output_path, OUTPUT_FILE_FORMATS, check_writable=True
        )
    if args.input_path != '-':
        common.validate_file_format(Path(args.input_path), check_readable=True)

    params = common.load_translation_params(args)

    if args.input_path == '-' \
            and constant.Strand.CRICK in params.strand.strands():
        raise err.NonRewindableSource(
            'stdin',
            'Input from stdin is not rewindable, so the bottom strand can not '
            'be scanned. Use --watson.'
        )

    common.print_start_message(args, params)
    scanner = ORFScanner(params)

    with ExitStack() as stack:
        if args.output_path is None:
            handle = sys.stdout
        else:
            handle = stack.enter_context(open(args.output_path, 'w'))
        writer = FastaORFWriter(handle)
        emitter = ORFEmitter(writer)
        sources = open_sources(args.input_path, args.informat)
        failed = scanner.translate_sources(sources, emitter)

    logger.info('%i ORFs written.', writer.count)
    if failed:
        logger.error(
            '%i sequence(s) could not be scanned: %s', len(failed),
            ', '.join(failed)
        )
        sys.exit(1)
