import logging
import sys
from typing import Iterable, Iterator, Optional, TextIO

from fslister.connector import Connector
from fslister.errors import ListerError, OpenError, StatError
from fslister.local import PSEUDO_ENTRIES, LocalConnector
from fslister.utils.entry import DirectoryEntry
from fslister.utils.format import format_mtime, format_permissions, format_size
from fslister.utils.options import ListOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class Lister:
    """Directory listing class.

    Attributes
    ----------
    connector : Connector
        Connector used to read directories and metadata.
    stdout : TextIO
        Stream for listing output.
    stderr : TextIO
        Stream for diagnostics.
    """

    def __init__(
        self,
        connector: Optional[Connector] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None
    ):
        self.connector = connector if connector is not None else LocalConnector()
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

    def run(self, path: str, options: ListOptions) -> int:
        """List directory and report root failures.

        Parameters
        ----------
        path : str
            Directory path.
        options : ListOptions
            Listing options.

        Returns
        -------
        int
            Exit status.
        """
        try:
            self.list_directory(path, options)
        except OpenError as err:
            self._report(err)
            return EXIT_FAILURE
        return EXIT_SUCCESS

    def list_directory(self, path: str, options: ListOptions) -> None:
        """List directory content.

        Per-entry metadata failures are reported and skipped. In recursive
        mode a subdirectory that cannot be opened is reported and its
        siblings are still listed.

        Parameters
        ----------
        path : str
            Directory path.
        options : ListOptions
            Listing options.

        Raises
        ------
        OpenError
            If ``path`` cannot be opened.
        """
        if options.recursive:
            self._list_recursive(path, options)
            return
        with self.connector.opendir(path) as entries:
            for entry in self._visible(entries, options):
                if options.show_details:
                    self._print_details(entry.path, options, entry.name)
                else:
                    print(entry.name, file=self.stdout)

    def format_entry(self, path: str, options: ListOptions, display_name: Optional[str] = None) -> str:
        """Format metadata row.

        Parameters
        ----------
        path : str
            File or directory path.
        options : ListOptions
            Listing options.
        display_name : str, optional
            Name printed in the last column, ``path`` if not given.

        Returns
        -------
        str
            Tab-separated metadata row.

        Raises
        ------
        StatError
            If the metadata query fails.
        """
        meta = self.connector.stat(path)
        fields = []
        if options.show_inode:
            fields.append(str(meta.inode))
        fields += [
            format_permissions(meta.mode),
            str(meta.nlink),
            meta.user if meta.user is not None else str(meta.uid),
            meta.group if meta.group is not None else str(meta.gid),
            format_size(meta.size, options.human_readable),
            format_mtime(meta.mtime),
            display_name if display_name is not None else path,
        ]
        return '\t'.join(fields)

    def _list_recursive(self, path: str, options: ListOptions) -> None:
        with self.connector.opendir(path) as entries:
            print(f'{path}:', file=self.stdout)
            for entry in self._visible(entries, options):
                self._print_details(entry.path, options, entry.name)
                if entry.kind == 'dir' and entry.name not in PSEUDO_ENTRIES:
                    try:
                        self._list_recursive(entry.path, options)
                    except OpenError as err:
                        self._report(err)

    def _print_details(self, path: str, options: ListOptions, name: str) -> None:
        try:
            row = self.format_entry(path, options, name)
        except StatError as err:
            self._report(err)
            return
        print(row, file=self.stdout)

    @staticmethod
    def _visible(entries: Iterable[DirectoryEntry], options: ListOptions) -> Iterator[DirectoryEntry]:
        for entry in entries:
            if not options.show_hidden and entry.name.startswith('.'):
                logger.debug('skipping hidden entry %s', entry.path)
                continue
            yield entry

    def _report(self, err: ListerError) -> None:
        logger.debug('%s', err, exc_info=err.cause)
        print(err, file=self.stderr)
