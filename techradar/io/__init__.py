"""I/O utilities for techradar"""

from .readers import CollectionReader, read_collection
from .writers import CollectionWriter, write_collection, TSVWriter, write_tsv, to_frame

__all__ = [
    'CollectionReader', 'read_collection',
    'CollectionWriter', 'write_collection',
    'TSVWriter', 'write_tsv',
    'to_frame']
