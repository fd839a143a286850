import grp
import logging
import os
import pwd
from contextlib import contextmanager
from typing import Iterator, Optional

from fslister.connector import Connector
from fslister.errors import OpenError, StatError
from fslister.utils.entry import DirectoryEntry, FileMetadata

logger = logging.getLogger(__name__)

PSEUDO_ENTRIES = ('.', '..')


class LocalConnector(Connector):
    """Local file system connector."""

    @contextmanager
    def opendir(self, path: str) -> Iterator[Iterator[DirectoryEntry]]:
        try:
            stream = os.scandir(path)
        except OSError as err:
            raise OpenError(path, err) from err
        logger.debug('opened directory %s', path)
        with stream:
            yield self._iter_entries(path, stream)
        logger.debug('closed directory %s', path)

    def stat(self, path: str) -> FileMetadata:
        try:
            st = os.stat(path)
        except OSError as err:
            raise StatError(path, err) from err
        return FileMetadata(
            inode=st.st_ino,
            mode=st.st_mode,
            nlink=st.st_nlink,
            uid=st.st_uid,
            gid=st.st_gid,
            size=st.st_size,
            mtime=st.st_mtime,
            user=self._user_name(st.st_uid),
            group=self._group_name(st.st_gid),
        )

    @staticmethod
    def _iter_entries(path: str, stream: Iterator[os.DirEntry]) -> Iterator[DirectoryEntry]:
        # os.scandir omits the pseudo entries
        for name in PSEUDO_ENTRIES:
            yield DirectoryEntry(name, f'{path}/{name}', 'dir')
        entries = iter(stream)
        while True:
            try:
                entry = next(entries)
            except StopIteration:
                return
            except OSError as err:
                raise OpenError(path, err) from err
            try:
                if entry.is_dir(follow_symlinks=False):
                    kind = 'dir'
                elif entry.is_file(follow_symlinks=False):
                    kind = 'file'
                else:
                    kind = 'other'
            except OSError:
                kind = 'other'
            yield DirectoryEntry(entry.name, f'{path}/{entry.name}', kind)

    @staticmethod
    def _user_name(uid: int) -> Optional[str]:
        try:
            return pwd.getpwuid(uid).pw_name
        except KeyError:
            return None

    @staticmethod
    def _group_name(gid: int) -> Optional[str]:
        try:
            return grp.getgrgid(gid).gr_name
        except KeyError:
            return None
