""" Main entry point of orfScan-util """
import argparse
from orfScan import util


def main():
    """ main """
    parser = argparse.ArgumentParser(
        prog=util.PROG_NAME,
        description='Utilities to validate orfScan.'
    )
    subparsers = parser.add_subparsers(
        title='Commands', dest='command', metavar='<command>'
    )
    util.brute_force.add_subparser_brute_force(subparsers)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        parser.exit(1)
    args.func(args)


if __name__ == '__main__':
    main()
