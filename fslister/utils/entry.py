from dataclasses import dataclass
from typing import Literal, Optional


@dataclass
class DirectoryEntry:
    name: str
    path: str
    kind: Literal['file', 'dir', 'other']


@dataclass
class FileMetadata:
    inode: int
    mode: int
    nlink: int
    uid: int
    gid: int
    size: int
    mtime: float
    user: Optional[str] = None
    group: Optional[str] = None
