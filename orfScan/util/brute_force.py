""" Brute force six-frame ORF caller.

The whole sequence is held in memory and each reading frame is translated in
one go with Biopython, then ORFs are cut between stop codons. It gives the
same ORFs as the streaming scanner and is used to verify it.
"""
from __future__ import annotations
from typing import TYPE_CHECKING
import argparse
import sys
from contextlib import ExitStack
from pathlib import Path
from Bio import SeqIO
from Bio.Seq import Seq
from orfScan import constant, get_logger
from orfScan.cli import common
from orfScan.codon_table import get_genetic_code
from orfScan.emitter import FastaORFWriter, ORFEmitter, ORFRecord
from orfScan.seqio import INPUT_FORMATS, strip_id
from orfScan.window import normalize


if TYPE_CHECKING:
    from typing import List
    from orfScan.codon_table import GeneticCode
    from orfScan.params import TranslationParams

UNAMBIGUOUS_DNA = set('ACGT')

# pylint: disable=W0212
def add_subparser_brute_force(subparsers:argparse._SubParsersAction):
    """ CLI for orfScan-util bruteForce """
    p:argparse.ArgumentParser = subparsers.add_parser(
        name='bruteForce',
        help='Call ORFs of in-memory sequences with the brute force caller.',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    p.add_argument(
        '-i', '--input-path',
        type=Path,
        help='Nucleotide sequence file.',
        metavar='<file>',
        required=True
    )
    p.add_argument(
        '--informat',
        type=str,
        help='Format of the input sequence file.',
        choices=INPUT_FORMATS,
        default='fasta'
    )
    common.add_args_output_path(p, ['.fa', '.fasta', '.faa'])
    common.add_args_translation(p)
    common.add_args_debug_level(p)
    p.set_defaults(func=brute_force)
    common.print_help_if_missing_args(p)
    return p


class BruteForceORFCaller():
    """ Six-frame ORF caller over a whole in-memory sequence. """
    def __init__(self, params:TranslationParams, code:GeneticCode=None):
        """ Constructor """
        self.params = params
        self.code = code or get_genetic_code(params.code_id)

    def translate_frame(self, nuc:str) -> str:
        """ Translate the complete codons of a frame. Biopython is used for
        unambiguous sequences. """
        nuc = nuc[:len(nuc) - len(nuc) % 3]
        if set(nuc) <= UNAMBIGUOUS_DNA:
            return str(Seq(nuc).translate(table=self.code.code_id))
        return self.code.translate_sequence(nuc)

    def find_start(self, nuc:str, lhs:int, rhs:int) -> int:
        """ Find the first codon index in [lhs, rhs) where an ORF may open,
        or -1. """
        policy = self.params.start_policy
        if policy is constant.StartPolicy.NONE:
            return lhs if lhs < rhs else -1
        for k in range(lhs, rhs):
            codon = nuc[k*3:k*3+3]
            if policy is constant.StartPolicy.REQUIRE_AUG:
                if codon == 'ATG':
                    return k
            elif self.code.is_initiator(codon):
                return k
        return -1

    def call_frame(self, nuc:str, phase:int) -> List[tuple]:
        """ Call the ORFs of one frame of a strand. Returns (start, end, seq)
        in strand-local coordinates, end being the position of the stop. """
        frame_nuc = nuc[phase:]
        aa_seq = self.translate_frame(frame_nuc)
        orfs = []
        i = 0
        while i < len(aa_seq):
            stop = aa_seq.find(constant.STOP_SYMBOL, i)
            if stop == -1:
                break
            k = self.find_start(frame_nuc, i, stop)
            if k > -1:
                peptide = aa_seq[k:stop]
                if self.params.requires_initiator:
                    peptide = constant.INITIATOR_RESIDUE + peptide[1:]
                if len(peptide) >= self.params.min_length:
                    orfs.append((phase + k * 3, phase + stop * 3, peptide))
            i = stop + 1
        return orfs

    def call_orfs(self, seq:str, name:str, description:str='') -> List[ORFRecord]:
        """ Call the ORFs of a sequence, sorted in output order. """
        seq = normalize(str(seq))
        seq_len = len(seq)
        records = []
        strands = self.params.strand.strands()
        if constant.Strand.WATSON in strands:
            for phase in range(3):
                for start, end, peptide in self.call_frame(seq, phase):
                    records.append(ORFRecord(
                        source_name=name, start=start + 1, end=end,
                        frame=phase + 1, seq=peptide, description=description
                    ))
        if constant.Strand.CRICK in strands:
            rc_seq = str(Seq(seq).reverse_complement())
            for phase in range(3):
                for start, end, peptide in self.call_frame(rc_seq, phase):
                    records.append(ORFRecord(
                        source_name=name, start=seq_len - start,
                        end=seq_len - end + 1, frame=phase + 4, seq=peptide,
                        description=description
                    ))
        records.sort(key=lambda x: x.sort_key())
        return records


def brute_force(args:argparse.Namespace) -> None:
    """ Main entrypoint of bruteForce """
    common.setup_logger(args)
    logger = get_logger()
    common.validate_file_format(args.input_path, check_readable=True)
    params = common.load_translation_params(args)
    common.print_start_message(args, params)
    caller = BruteForceORFCaller(params)

    with ExitStack() as stack:
        if args.output_path is None:
            handle = sys.stdout
        else:
            handle = stack.enter_context(open(args.output_path, 'w'))
        emitter = ORFEmitter(FastaORFWriter(handle))
        for record in SeqIO.parse(args.input_path, args.informat):
            description = strip_id(record.id, record.description)
            for orf in caller.call_orfs(str(record.seq), record.id, description):
                emitter.add(orf)
            orfs = emitter.flush()
            logger.info('%s: %i ORFs written.', record.id, len(orfs))
