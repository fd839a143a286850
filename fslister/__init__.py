from fslister.connector import Connector
from fslister.errors import ListerError, OpenError, StatError
from fslister.lister import Lister
from fslister.local import LocalConnector
from fslister.utils.entry import DirectoryEntry, FileMetadata
from fslister.utils.options import ListOptions

__all__ = [
    'Connector',
    'DirectoryEntry',
    'FileMetadata',
    'ListOptions',
    'ListerError',
    'Lister',
    'LocalConnector',
    'OpenError',
    'StatError',
]
