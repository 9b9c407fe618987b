"""JSON-file preferences backend.

Each namespace is one JSON document, ``<directory>/<name>.json``, read
lazily on first access and rewritten atomically on every change.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from weathercity.exceptions import PreferencesWriteError
from weathercity.preferences.base import SharedPreferences
from weathercity.preferences.models import PreferencesDocument

_logger = logging.getLogger(__name__)


class JsonFilePreferences(SharedPreferences):
    """Preferences persisted as a JSON document in *directory*."""

    def __init__(self, directory: Path | str, name: str) -> None:
        super().__init__(name)
        self._directory = Path(directory)
        self._data: dict[str, str] | None = None

    @property
    def path(self) -> Path:
        return self._directory / f"{self.name}.json"

    def _values(self) -> dict[str, str]:
        if self._data is None:
            self._data = self._read()
        return self._data

    def _read(self) -> dict[str, str]:
        path = self.path
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            _logger.debug("Preferences file %s not found; starting empty", path)
            return {}
        except (OSError, UnicodeDecodeError):
            _logger.warning("Preferences file %s unreadable; starting empty", path, exc_info=True)
            return {}

        try:
            document = PreferencesDocument.model_validate_json(raw)
        except ValidationError as exc:
            # A damaged file must not block startup; the next write replaces it.
            _logger.warning("Ignoring invalid preferences file %s: %s", path, exc.errors(include_url=False))
            return {}

        if document.name != self.name:
            _logger.warning(
                "Preferences file %s holds namespace %r, expected %r; starting empty",
                path,
                document.name,
                self.name,
            )
            return {}

        _logger.debug("Loaded %d preference(s) from %s", len(document.values), path)
        return dict(document.values)

    def _write(self, values: dict[str, str]) -> None:
        path = self.path
        document = PreferencesDocument(name=self.name, values=values)
        payload = document.model_dump_json(indent=2)
        tmp_name: str | None = None
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.name}.", suffix=".tmp", dir=self._directory)
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as exc:
            raise PreferencesWriteError(f"Failed to write preferences to {path}: {exc}", path=path) from exc
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

        self._data = values
        _logger.debug("Wrote %d preference(s) to %s", len(values), path)
