import os
import logging
from pathlib import Path
from typing import Iterator, List, Optional, Set

from ..models import RomRecord
from ..parsing.filename import parse_rom_name


class RomScanner:
    def scan(self, root: Path, skip_dirs: Optional[Set[Path]] = None) -> Iterator[RomRecord]:
        """
        Generator that yields a RomRecord for every regular file under root.

        Files with an unrecognised extension are yielded too; deciding what
        to do with them is the resolver's job.
        """
        skip_dirs = skip_dirs or set()
        for path in self._iter_files(root, skip_dirs):
            yield parse_rom_name(path.name, path)

    def list_directory(self, directory: Path) -> Optional[List[os.DirEntry]]:
        """Immediate children of directory, or None if it can't be listed."""
        try:
            with os.scandir(directory) as it:
                return list(it)
        except NotADirectoryError:
            logging.warning(f"NOT A DIRECTORY: {directory}")
        except FileNotFoundError:
            logging.warning(f"Directory does not exist: {directory}")
        except OSError as e:
            logging.warning(f"Cannot read {directory}: {e}")
        return None

    def _iter_files(self, root: Path, skip_dirs: Set[Path]) -> Iterator[Path]:
        """Depth-first walker using os.scandir."""
        stack = [root]
        while stack:
            current = stack.pop()
            if skip_dirs and any(sd == current or sd in current.parents for sd in skip_dirs):
                logging.debug(f"Skipping {current}")
                continue

            entries = self.list_directory(current)
            if entries is None:
                continue

            logging.debug(f"Checking: {current.name or current}")

            # Sort for stable traversal order
            entries.sort(key=lambda e: e.name.lower())

            dirs = []
            files = []
            for e in entries:
                if e.is_dir(follow_symlinks=False):
                    dirs.append(Path(e.path))
                elif e.is_file(follow_symlinks=False):
                    files.append(Path(e.path))

            # Push dirs to stack (reversed so we process A before Z)
            for d in reversed(dirs):
                stack.append(d)

            for f in files:
                yield f
