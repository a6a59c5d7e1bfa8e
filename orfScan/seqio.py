""" Sequence sources that the scan driver reads windows from.

A source only needs to tell its name, description and length, and to return
the nucleotides of a half open range. Whether it can move backwards is a
capability (`rewindable`) that the scanner checks before scanning the bottom
strand.
"""
from __future__ import annotations
from typing import TYPE_CHECKING
import abc
import gzip
import sys
from pathlib import Path
from Bio import SeqIO
from Bio.SeqRecord import SeqRecord
import pysam
from orfScan import err, get_logger


if TYPE_CHECKING:
    from typing import Dict, Iterable, Iterator, Union

STREAM_CHUNK_SIZE = 65536
INPUT_FORMATS = ['fasta', 'genbank', 'embl']


class SequenceSource(abc.ABC):
    """ Base class of sequence sources.

    ## Attributes:
        - name (str): Sequence identifier.
        - description (str): Free text description, without the identifier.
        - length (int): Number of nucleotides.
    """
    rewindable:bool = True

    def __init__(self, name:str, description:str, length:int):
        """ Constructor """
        self.name = name
        self.description = description or ''
        self.length = length

    def __len__(self) -> int:
        """ length """
        return self.length

    def __repr__(self) -> str:
        """ repr """
        return f"{type(self).__name__}(name='{self.name}', length={self.length})"

    @abc.abstractmethod
    def fetch(self, start:int, end:int) -> str:
        """ Get the nucleotides in [start, end). """


class SeqRecordSource(SequenceSource):
    """ Sequence held in memory. Can be read in any order. """
    rewindable = True

    def __init__(self, seq:Union[str, SeqRecord], name:str=None,
            description:str=None):
        """ Constructor """
        if isinstance(seq, SeqRecord):
            record = seq
            name = name or record.id
            if description is None:
                description = strip_id(record.id, record.description)
            seq = str(record.seq)
        super().__init__(name=name, description=description, length=len(seq))
        self.seq = str(seq)

    def fetch(self, start:int, end:int) -> str:
        """ Get the nucleotides in [start, end). """
        if start < 0 or end > self.length or start > end:
            raise err.SequenceIOError(self.name, start, end, 'out of bounds')
        return self.seq[start:end]


class StreamSource(SequenceSource):
    """ Sequence that can only be read front to back, e.g. from stdin.

    Chunks are pulled from the iterator as needed. A range may start anywhere
    at or after the end of the previous read; reading behind it raises
    NonRewindableSource.
    """
    rewindable = False

    def __init__(self, name:str, description:str, length:int,
            chunks:Iterable[str]):
        """ Constructor """
        super().__init__(name=name, description=description, length=length)
        self._chunks:Iterator[str] = iter(chunks)
        self._buffer = ''
        self._buffer_start = 0
        self.position = 0

    def fetch(self, start:int, end:int) -> str:
        """ Get the nucleotides in [start, end). """
        if start < self.position:
            raise err.NonRewindableSource(
                self.name,
                f"Can not read {self.name}:{start}-{end}, the stream is "
                f"already at {self.position}."
            )
        if end > self.length or start > end:
            raise err.SequenceIOError(self.name, start, end, 'out of bounds')
        while self._buffer_start + len(self._buffer) < end:
            try:
                chunk = next(self._chunks)
            except StopIteration as e:
                raise err.SequenceIOError(
                    self.name, start, end, 'unexpected end of stream'
                ) from e
            self._buffer += chunk
        seq = self._buffer[start - self._buffer_start:end - self._buffer_start]
        self._buffer = self._buffer[end - self._buffer_start:]
        self._buffer_start = end
        self.position = end
        return seq


class FaidxSource(SequenceSource):
    """ A reference of an indexed FASTA file. Windows are read from disk on
    demand, so the sequence is never held in memory as a whole. """
    rewindable = True

    def __init__(self, fasta:pysam.FastaFile, name:str, description:str=None):
        """ Constructor """
        super().__init__(
            name=name, description=description,
            length=fasta.get_reference_length(name)
        )
        self.fasta = fasta

    def fetch(self, start:int, end:int) -> str:
        """ Get the nucleotides in [start, end). """
        try:
            seq = self.fasta.fetch(self.name, start, end)
        except (OSError, ValueError, KeyError) as e:
            raise err.SequenceIOError(self.name, start, end, e) from e
        if len(seq) != end - start:
            raise err.SequenceIOError(
                self.name, start, end,
                f"expected {end - start} nucleotides, got {len(seq)}"
            )
        return seq


def strip_id(seq_id:str, description:str) -> str:
    """ Remove the leading identifier from a record description. """
    if description == seq_id:
        return ''
    if description.startswith(seq_id + ' '):
        return description[len(seq_id) + 1:].strip()
    return description

def split_stream(seq:str, chunk_size:int=STREAM_CHUNK_SIZE) -> Iterator[str]:
    """ Split a sequence into chunks """
    for i in range(0, len(seq), chunk_size):
        yield seq[i:i+chunk_size]

def is_gzipped(path:Path) -> bool:
    """ Whether a file name has the gzip suffix """
    return str(path).endswith('.gz')

def read_fasta_descriptions(path:Path) -> Dict[str, str]:
    """ Read the description of every record from the FASTA header lines. """
    descriptions = {}
    opener = gzip.open if is_gzipped(path) else open
    with opener(path, 'rt') as handle:
        for line in handle:
            if not line.startswith('>'):
                continue
            header = line[1:].strip()
            if not header:
                continue
            fields = header.split(None, 1)
            descriptions[fields[0]] = fields[1] if len(fields) > 1 else ''
    return descriptions

def open_sources(path:Union[str, Path], informat:str='fasta'
        ) -> Iterator[SequenceSource]:
    """ Iterate over the sequences of a file.

    - '-' reads from stdin, and every sequence is a StreamSource.
    - FASTA files are opened with pysam, which builds a .fai index if missing.
      Plain gzip FASTA can not be indexed and is parsed into memory instead.
    - Other formats are parsed with Bio.SeqIO and held in memory.
    """
    logger = get_logger()
    informat = informat.lower()
    if informat not in INPUT_FORMATS:
        raise ValueError(
            f"Input format '{informat}' is not supported. Valid formats: "
            f"{INPUT_FORMATS}"
        )

    if str(path) == '-':
        for record in SeqIO.parse(sys.stdin, informat):
            seq = str(record.seq)
            yield StreamSource(
                name=record.id,
                description=strip_id(record.id, record.description),
                length=len(seq),
                chunks=split_stream(seq)
            )
        return

    path = Path(path)
    if informat == 'fasta':
        logger.debug('Opening indexed FASTA %s', path)
        try:
            fasta = pysam.FastaFile(str(path))
        except OSError:
            if not is_gzipped(path):
                raise
            # plain gzip can not be indexed, only bgzip can
            logger.warning(
                '%s is not bgzip compressed, so it is read into memory. '
                'Compress it with bgzip to read it by windows.', path
            )
            with gzip.open(path, 'rt') as handle:
                for record in SeqIO.parse(handle, 'fasta'):
                    yield SeqRecordSource(record)
            return
        descriptions = read_fasta_descriptions(path)
        with fasta:
            for name in fasta.references:
                yield FaidxSource(fasta, name, descriptions.get(name))
        return

    for record in SeqIO.parse(path, informat):
        yield SeqRecordSource(record)
