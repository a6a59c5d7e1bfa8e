""" Genetic code tables used for six-frame translation.

The codon assignments, stop codons and initiator codons are taken from the NCBI
translation tables shipped with Biopython. On top of the 64 unambiguous codons,
every codon made of IUPAC ambiguity symbols is resolved once at construction:
it translates to a residue only if all codons it stands for agree, and to the
unknown residue `X` otherwise.
"""
from __future__ import annotations
from typing import TYPE_CHECKING
import functools
import itertools
from Bio.Data import CodonTable, IUPACData
from orfScan import constant, err


if TYPE_CHECKING:
    from typing import Dict, FrozenSet, List, Tuple

AMBIGUOUS_DNA_VALUES:Dict[str, str] = IUPACData.ambiguous_dna_values
_NORMALIZE = str.maketrans('Uu', 'TT')


def normalize_codon(codon:str) -> str:
    """ Upper case, U to T, and any non IUPAC symbol to N. """
    codon = codon.upper().translate(_NORMALIZE)
    if all(x in AMBIGUOUS_DNA_VALUES for x in codon):
        return codon
    return ''.join(x if x in AMBIGUOUS_DNA_VALUES else constant.UNKNOWN_NUCLEOTIDE
        for x in codon)

class GeneticCode():
    """ A codon to amino acid mapping with its set of initiator codons.

    ## Attributes:
        - code_id (int): NCBI transl_table id.
        - name (str): Name of the table, e.g. 'Standard'.
        - stop_codons (FrozenSet[str]): Unambiguous stop codons.
        - start_codons (FrozenSet[str]): Unambiguous initiator codons.

    Instances are not modified after construction and can be shared by all
    reading frames.
    """
    def __init__(self, code_id:int=constant.DEFAULT_CODE_ID):
        """ Constructor """
        if code_id not in constant.SUPPORTED_CODE_IDS:
            raise err.InvalidCodeId(code_id, constant.SUPPORTED_CODE_IDS)
        table = CodonTable.unambiguous_dna_by_id[code_id]
        self.code_id:int = code_id
        self.name:str = table.names[0]
        self.stop_codons:FrozenSet[str] = frozenset(table.stop_codons)
        self.start_codons:FrozenSet[str] = frozenset(table.start_codons)
        forward_table = dict(table.forward_table)

        translations = {}
        initiators = set()
        for symbols in itertools.product(AMBIGUOUS_DNA_VALUES, repeat=3):
            codon = ''.join(symbols)
            expanded = [''.join(x) for x in itertools.product(
                *(AMBIGUOUS_DNA_VALUES[s] for s in symbols)
            )]
            residues = {
                constant.STOP_SYMBOL if x in self.stop_codons else forward_table[x]
                for x in expanded
            }
            if len(residues) == 1:
                translations[codon] = residues.pop()
            else:
                translations[codon] = constant.UNKNOWN_RESIDUE
            if all(x in self.start_codons for x in expanded):
                initiators.add(codon)
        self._translations:Dict[str, str] = translations
        self._initiators:FrozenSet[str] = frozenset(initiators)

    def __repr__(self) -> str:
        """ repr """
        return f"GeneticCode(code_id={self.code_id}, name='{self.name}')"

    def translate(self, codon:str) -> str:
        """ Translate a single codon. Returns a one letter amino acid, '*' for
        stop codons, or 'X' if the codon is ambiguous. """
        residue = self._translations.get(codon)
        if residue is None:
            if len(codon) != constant.CODON_SIZE:
                raise ValueError(f"Codon must be 3 nucleotides long: '{codon}'")
            residue = self._translations[normalize_codon(codon)]
        return residue

    def is_stop(self, codon:str) -> bool:
        """ Checks whether every codon the given codon stands for is a stop. """
        return self.translate(codon) == constant.STOP_SYMBOL

    def is_initiator(self, codon:str) -> bool:
        """ Checks whether the codon is an initiator of this table. Ambiguous
        codons qualify only if all of their expansions are initiators. """
        if codon in self._initiators:
            return True
        if codon in self._translations:
            return False
        return normalize_codon(codon) in self._initiators

    @staticmethod
    def is_aug(codon:str) -> bool:
        """ Checks whether the codon is ATG/AUG """
        return normalize_codon(codon) == 'ATG'

    def translate_sequence(self, seq:str) -> str:
        """ Translate all complete codons of a nucleotide sequence, from the
        first nucleotide. Stop codons are kept as '*'. """
        seq = str(seq)
        return ''.join(
            self.translate(seq[i:i+3])
            for i in range(0, len(seq) - len(seq) % 3, 3)
        )

    @staticmethod
    def list_codes() -> List[Tuple[int, str]]:
        """ List the supported table ids and their names. """
        return [
            (i, CodonTable.unambiguous_dna_by_id[i].names[0])
            for i in constant.SUPPORTED_CODE_IDS
        ]

@functools.lru_cache(maxsize=None)
def get_genetic_code(code_id:int=constant.DEFAULT_CODE_ID) -> GeneticCode:
    """ Get the genetic code of a given table id. Tables are built once and
    shared. """
    return GeneticCode(code_id)
