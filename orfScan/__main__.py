""" Main entry point of orfScan """
import argparse
from orfScan import __version__, cli


PROG_NAME = 'orfScan'

def main():
    """ main """
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description='Six-frame ORF scanner and translator.'
    )
    parser.add_argument(
        '-V', '--version',
        action='version',
        version=f"{PROG_NAME} {__version__}"
    )
    subparsers = parser.add_subparsers(
        title='Commands', dest='command', metavar='<command>'
    )
    cli.add_subparser_translate(subparsers)
    cli.add_subparser_list_codes(subparsers)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        parser.exit(1)
    args.func(args)


if __name__ == '__main__':
    main()
