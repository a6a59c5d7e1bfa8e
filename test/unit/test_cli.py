""" Test module for the command line tools """
import argparse
import contextlib
import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock
from orfScan import cli, err
from orfScan.util import brute_force


FASTA = (
    '>seq1 test sequence one\n'
    'ATGAAATAGCCC\n'
    '>seq2\n'
    'CTATTTCAT\n'
)

def create_parser() -> argparse.ArgumentParser:
    """ Create the orfScan parser """
    parser = argparse.ArgumentParser(prog='orfScan')
    subparsers = parser.add_subparsers(dest='command')
    cli.add_subparser_translate(subparsers)
    cli.add_subparser_list_codes(subparsers)
    brute_force.add_subparser_brute_force(subparsers)
    return parser


class TestTranslate(unittest.TestCase):
    """ Test cases for orfScan translate """
    def test_translate(self):
        """ ORFs of all sequences are numbered across the file """
        with tempfile.TemporaryDirectory() as tmp:
            input_path = Path(tmp)/'input.fa'
            input_path.write_text(FASTA)
            output_path = Path(tmp)/'orfs.fa'
            args = create_parser().parse_args([
                'translate', '-i', str(input_path), '-o', str(output_path),
                '-l', '2', '-m', '--debug-level', 'WARNING'
            ])
            args.func(args)
            self.assertEqual(
                output_path.read_text(),
                '>orf1 source=seq1 coords=1..6 length=2 frame=1 test sequence one\n'
                'MK\n'
                '>orf2 source=seq2 coords=9..4 length=2 frame=4\n'
                'MK\n'
            )

    def test_translate_watson(self):
        """ --watson skips the bottom strand """
        with tempfile.TemporaryDirectory() as tmp:
            input_path = Path(tmp)/'input.fa'
            input_path.write_text(FASTA)
            output_path = Path(tmp)/'orfs.fa'
            args = create_parser().parse_args([
                'translate', '-i', str(input_path), '-o', str(output_path),
                '-l', '2', '-m', '--watson', '--debug-level', 'WARNING'
            ])
            args.func(args)
            self.assertEqual(output_path.read_text().count('>'), 1)

    def test_translate_stdin_requires_watson(self):
        """ stdin can not be rewound for the bottom strand """
        args = create_parser().parse_args([
            'translate', '-i', '-', '--debug-level', 'WARNING'
        ])
        with self.assertRaises(err.NonRewindableSource):
            args.func(args)

    def test_translate_stdin(self):
        """ The top strand of stdin is written to stdout """
        args = create_parser().parse_args([
            'translate', '-i', '-', '-l', '2', '-m', '--watson',
            '--debug-level', 'WARNING'
        ])
        stdout = io.StringIO()
        with mock.patch('sys.stdin', io.StringIO(FASTA)), \
                contextlib.redirect_stdout(stdout):
            args.func(args)
        self.assertEqual(
            stdout.getvalue(),
            '>orf1 source=seq1 coords=1..6 length=2 frame=1 test sequence one\n'
            'MK\n'
        )

    def test_missing_input(self):
        """ A missing input file is reported before anything is opened """
        with tempfile.TemporaryDirectory() as tmp:
            args = create_parser().parse_args([
                'translate', '-i', str(Path(tmp)/'missing.fa'),
                '--debug-level', 'WARNING'
            ])
            with self.assertRaises(FileNotFoundError):
                args.func(args)

    def test_invalid_output_format(self):
        """ Output must be FASTA """
        args = create_parser().parse_args([
            'translate', '-i', 'input.fa', '-o', 'orfs.txt',
            '--debug-level', 'WARNING'
        ])
        with self.assertRaises(ValueError):
            args.func(args)

    def test_options(self):
        """ Start and strand options """
        parser = create_parser()
        args = parser.parse_args(['translate', '-i', 'x.fa'])
        self.assertEqual(args.start_policy, 'none')
        self.assertEqual(args.strand, 'both')
        self.assertEqual(args.codon_table, 1)
        self.assertEqual(args.min_length, 20)
        args = parser.parse_args(['translate', '-i', 'x.fa', '-M', '--crick', '-c', '11'])
        self.assertEqual(args.start_policy, 'any')
        self.assertEqual(args.strand, 'crick')
        self.assertEqual(args.codon_table, 11)
        with self.assertRaises(SystemExit), \
                contextlib.redirect_stderr(io.StringIO()):
            parser.parse_args(['translate', '-i', 'x.fa', '-m', '-M'])
        with self.assertRaises(SystemExit), \
                contextlib.redirect_stderr(io.StringIO()):
            parser.parse_args(['translate', '-i', 'x.fa', '-c', '7'])


class TestListCodes(unittest.TestCase):
    """ Test cases for orfScan listCodes """
    def test_list_codes(self):
        """ One line per table """
        args = create_parser().parse_args(['listCodes'])
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            args.func(args)
        lines = stdout.getvalue().splitlines()
        self.assertEqual(len(lines), 18)
        self.assertEqual(lines[0], '  1  Standard (default)')


class TestBruteForceCli(unittest.TestCase):
    """ Test cases for orfScan-util bruteForce """
    def test_brute_force_matches_translate(self):
        """ Both commands write the same file """
        with tempfile.TemporaryDirectory() as tmp:
            input_path = Path(tmp)/'input.fa'
            input_path.write_text(FASTA)
            outputs = []
            for command in ['translate', 'bruteForce']:
                output_path = Path(tmp)/f"{command}.fa"
                args = create_parser().parse_args([
                    command, '-i', str(input_path), '-o', str(output_path),
                    '-l', '1', '--debug-level', 'WARNING'
                ])
                args.func(args)
                outputs.append(output_path.read_text())
            self.assertEqual(outputs[0], outputs[1])
            self.assertTrue(outputs[0].startswith('>orf1 '))

    def test_brute_force_options(self):
        """ Input formats are restricted like in translate """
        parser = create_parser()
        args = parser.parse_args(['bruteForce', '-i', 'x.gb', '--informat', 'genbank'])
        self.assertEqual(args.informat, 'genbank')
        with self.assertRaises(SystemExit), \
                contextlib.redirect_stderr(io.StringIO()):
            parser.parse_args(['bruteForce', '-i', 'x.fa', '--informat', 'plain'])

    def test_brute_force_missing_input(self):
        """ A missing input file is reported """
        with tempfile.TemporaryDirectory() as tmp:
            args = create_parser().parse_args([
                'bruteForce', '-i', str(Path(tmp)/'missing.fa'),
                '--debug-level', 'WARNING'
            ])
            with self.assertRaises(FileNotFoundError):
                args.func(args)
