""" Window buffer over a sequence source """
from __future__ import annotations
from typing import TYPE_CHECKING
from orfScan import constant, err, get_logger
from orfScan.codon_table import AMBIGUOUS_DNA_VALUES


if TYPE_CHECKING:
    from orfScan.seqio import SequenceSource

COMPLEMENT = str.maketrans(
    'ACGTMRWSYKVHDBXN',
    'TGCAKYWSRMBDHVXN'
)

def _build_normalizer() -> dict:
    """ Translation table that upper-cases, maps U to T and anything that is
    not an IUPAC nucleotide to N. """
    table = {}
    for i in range(128):
        char = chr(i).upper()
        if char == 'U':
            char = 'T'
        if char not in AMBIGUOUS_DNA_VALUES:
            char = constant.UNKNOWN_NUCLEOTIDE
        table[i] = char
    return table

NORMALIZE = _build_normalizer()


def normalize(seq:str) -> str:
    """ Normalize nucleotides to upper case DNA. """
    seq = seq.translate(NORMALIZE)
    if seq.isascii():
        return seq
    return ''.join(x if x.isascii() else constant.UNKNOWN_NUCLEOTIDE for x in seq)

def reverse_complement(seq:str) -> str:
    """ Reverse complement of a normalized sequence """
    return seq.translate(COMPLEMENT)[::-1]


class WindowBuffer():
    """ A bounded slice of a sequence, with the nucleotides shared with the
    previous window (`overlap`) kept in memory when the window moves.

    Offsets taken by all accessors are absolute, 0-based positions on the top
    strand. The buffer holds [start, end).

    ## Attributes:
        - source (SequenceSource): The sequence being read.
        - size (int): Maximal number of nucleotides held.
        - overlap (int): Number of nucleotides two consecutive windows share.
    """
    def __init__(self, source:SequenceSource, size:int, overlap:int):
        """ Constructor """
        if overlap < constant.CODON_SIZE:
            raise ValueError(
                f"Window overlap must be at least {constant.CODON_SIZE}, got "
                f"{overlap}."
            )
        if size <= overlap:
            raise ValueError(
                f"Window size ({size}) must be larger than its overlap ({overlap})."
            )
        self.source = source
        self.size = size
        self.overlap = overlap
        self.seq = ''
        self.start = 0

    @property
    def end(self) -> int:
        """ End of the window, exclusive """
        return self.start + len(self.seq)

    def __len__(self) -> int:
        """ length """
        return len(self.seq)

    def __repr__(self) -> str:
        """ repr """
        return f"WindowBuffer({self.source.name}:{self.start}-{self.end})"

    def _read(self, start:int, end:int) -> str:
        """ Read and normalize [start, end) from the source. """
        try:
            seq = self.source.fetch(start, end)
        except err.OrfScanError:
            raise
        except (OSError, ValueError) as e:
            raise err.SequenceIOError(self.source.name, start, end, e) from e
        return normalize(str(seq))

    def load(self, start:int, length:int=None):
        """ Load [start, start + length) into the buffer. The window is cut
        at the end of the sequence. """
        if length is None:
            length = self.size
        seq_len = self.source.length
        if start < 0 or start >= seq_len:
            raise err.WindowOutOfRange(
                f"Window start {start} is out of range for {self.source.name} "
                f"of length {seq_len}."
            )
        end = min(seq_len, start + length)
        self.seq = self._read(start, end)
        self.start = start

    def advance(self) -> bool:
        """ Move the window towards the end of the sequence. The new window
        starts `overlap` nucleotides before the current end. Returns False if
        the window already reaches the end. """
        seq_len = self.source.length
        if self.end >= seq_len:
            return False
        new_start = self.end - self.overlap
        new_end = min(seq_len, new_start + self.size)
        self.seq = self.seq[-self.overlap:] + self._read(self.end, new_end)
        self.start = new_start
        get_logger().debug('%s moved to %i-%i', self.source.name, self.start, self.end)
        return True

    def retreat(self) -> bool:
        """ Move the window towards the beginning of the sequence. The new
        window ends `overlap` nucleotides after the current start. Requires a
        rewindable source. Returns False if the window is already at the
        beginning. """
        if self.start <= 0:
            return False
        if not self.source.rewindable:
            raise err.NonRewindableSource(self.source.name)
        new_start = max(0, self.start - (self.size - self.overlap))
        self.seq = self._read(new_start, self.start) + self.seq[:self.overlap]
        self.start = new_start
        get_logger().debug('%s moved to %i-%i', self.source.name, self.start, self.end)
        return True

    def _index(self, offset:int) -> int:
        """ Buffer index of an absolute offset """
        i = offset - self.start
        if i < 0 or i >= len(self.seq):
            raise err.WindowOutOfRange(
                f"Offset {offset} is outside of the window {self.start}-{self.end}."
            )
        return i

    def symbol_at(self, offset:int) -> str:
        """ Nucleotide at an absolute offset """
        return self.seq[self._index(offset)]

    def complement_at(self, offset:int) -> str:
        """ Complement of the nucleotide at an absolute offset. """
        return self.symbol_at(offset).translate(COMPLEMENT)

    def codon_at(self, offset:int) -> str:
        """ Top strand codon covering [offset, offset + 3) """
        i = self._index(offset)
        self._index(offset + 2)
        return self.seq[i:i+3]

    def reverse_codon_at(self, offset:int) -> str:
        """ Bottom strand codon whose first nucleotide pairs with the top
        strand nucleotide at `offset`. It covers [offset - 2, offset]. """
        i = self._index(offset - 2)
        self._index(offset)
        return reverse_complement(self.seq[i:i+3])
