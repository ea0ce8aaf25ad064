"""
Ingestion Layer

RESPONSIBILITY: Load the people dataset into immutable PersonRecords
ALLOWED INPUTS: A JSON file path or an already-decoded list of records
OUTPUTS: LoadResult (people + issues)

WHAT THIS LAYER MUST NOT DO:
============================
- Fetch anything over the network
- Repair malformed records
- Choose display strings for a language (display fields pass through)
"""

from .contracts import LoaderConfig, LoadIssue, LoadResult
from .loader import load_people, parse_person, read_document

__all__ = [
    'LoaderConfig', 'LoadIssue', 'LoadResult',
    'load_people', 'parse_person', 'read_document',
]
