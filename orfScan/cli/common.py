""" Arguments and helpers shared by the command line tools """
from __future__ import annotations
from typing import TYPE_CHECKING
import argparse
import sys
from pathlib import Path
from orfScan import __version__, constant, get_logger, set_logger_level
from orfScan.params import TranslationParams
from orfScan.seqio import INPUT_FORMATS


if TYPE_CHECKING:
    from typing import List

DEBUG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def add_args_input_path(parser:argparse.ArgumentParser):
    """ Add the input sequence file argument """
    group = parser.add_argument_group('Input Files')
    group.add_argument(
        '-i', '--input-path',
        type=str,
        help="Nucleotide sequence file. Use '-' to read from stdin, in which "
        "case only the top strand can be scanned.",
        metavar='<file>',
        required=True
    )
    group.add_argument(
        '--informat',
        type=str,
        help='Format of the input sequence file.',
        choices=INPUT_FORMATS,
        default='fasta'
    )

def add_args_output_path(parser:argparse.ArgumentParser,
        formats:List[str]):
    """ Add the output path argument """
    parser.add_argument(
        '-o', '--output-path',
        type=Path,
        help=f"Output FASTA of translated ORFs. Valid formats: {formats}. "
        "Written to stdout if not given.",
        metavar='<file>',
        default=None
    )

def add_args_translation(parser:argparse.ArgumentParser):
    """ Add genetic code, ORF length, start codon and strand arguments. """
    group = parser.add_argument_group('Translation Parameters')
    group.add_argument(
        '-c', '--codon-table',
        type=int,
        help='NCBI genetic code table id.',
        choices=constant.SUPPORTED_CODE_IDS,
        default=constant.DEFAULT_CODE_ID,
        metavar='<number>'
    )
    group.add_argument(
        '-l', '--min-length',
        type=int,
        help='Minimal ORF length in amino acids.',
        default=constant.DEFAULT_MIN_LENGTH,
        metavar='<number>'
    )
    start = group.add_mutually_exclusive_group()
    start.add_argument(
        '-m', '--require-aug',
        action='store_const',
        dest='start_policy',
        const=constant.StartPolicy.REQUIRE_AUG.value,
        help='ORFs must start with an AUG. It is translated as M.'
    )
    start.add_argument(
        '-M', '--require-initiator',
        action='store_const',
        dest='start_policy',
        const=constant.StartPolicy.REQUIRE_ANY_INITIATOR.value,
        help='ORFs must start with an initiator codon of the genetic code. It '
        'is translated as M.'
    )
    strand = group.add_mutually_exclusive_group()
    strand.add_argument(
        '--watson',
        action='store_const',
        dest='strand',
        const=constant.StrandSelection.WATSON.value,
        help='Only scan the top strand.'
    )
    strand.add_argument(
        '--crick',
        action='store_const',
        dest='strand',
        const=constant.StrandSelection.CRICK.value,
        help='Only scan the bottom strand.'
    )
    parser.set_defaults(
        start_policy=constant.StartPolicy.NONE.value,
        strand=constant.StrandSelection.BOTH.value
    )
    group.add_argument(
        '--window-size',
        type=int,
        help='Number of nucleotides read into memory at a time.',
        default=constant.DEFAULT_WINDOW_SIZE,
        metavar='<number>'
    )
    group.add_argument(
        '--window-redundancy',
        type=int,
        help='Number of codons shared by two consecutive windows.',
        default=constant.DEFAULT_WINDOW_REDUNDANCY,
        metavar='<number>'
    )

def add_args_debug_level(parser:argparse.ArgumentParser):
    """ Add the debug level argument """
    parser.add_argument(
        '--debug-level',
        type=str,
        help=f"Debug level. One of {DEBUG_LEVELS}, or a number.",
        default='INFO',
        metavar='<value>'
    )

def print_help_if_missing_args(parser:argparse.ArgumentParser):
    """ Print the help message if no argument is given after the command. """
    if len(sys.argv) == 2 and sys.argv[1] == parser.prog.split()[-1]:
        parser.print_help(sys.stderr)
        sys.exit(1)

def setup_logger(args:argparse.Namespace):
    """ Set the log level from the arguments """
    set_logger_level(getattr(args, 'debug_level', 'INFO'))

def print_start_message(args:argparse.Namespace, params:TranslationParams=None):
    """ Log the command and its parameters """
    logger = get_logger()
    logger.info('orfScan %s, %s', __version__, args.command)
    if params is not None:
        for key, val in params.jsonfy().items():
            logger.info('  %s: %s', key, val)

def validate_file_format(file:Path, types:List[str]=None,
        check_readable:bool=False, check_writable:bool=False):
    """ Check the file extension and that it can be read or written. """
    if types:
        suffixes = file.suffixes
        if suffixes and suffixes[-1] in ('.gz',):
            suffixes = suffixes[:-1]
        if not suffixes or suffixes[-1] not in types:
            raise ValueError(
                f"Invalid file format: {file}. Valid formats: {types}"
            )
    if check_readable and not file.is_file():
        raise FileNotFoundError(f"File not found: {file}")
    if check_writable and not file.parent.exists():
        raise FileNotFoundError(f"Directory not found: {file.parent}")

def load_translation_params(args:argparse.Namespace) -> TranslationParams:
    """ Build the translation parameters from the arguments """
    return TranslationParams(
        code_id=args.codon_table,
        min_length=args.min_length,
        start_policy=args.start_policy,
        strand=args.strand,
        window_size=args.window_size,
        window_redundancy=args.window_redundancy
    )
