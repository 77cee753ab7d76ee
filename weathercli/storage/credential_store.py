"""Persistence for the API key and the date it was set up."""

import logging
from pathlib import Path

from weathercli.models.common import utc_now_iso
from weathercli.models.weather import Credential
from weathercli.storage.json_file import (
    ReadResult,
    StorageErrorKind,
    read_json,
    write_json,
)

logger = logging.getLogger(__name__)


class CredentialStore:
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def read(self) -> ReadResult:
        """Read the credential, keeping absent and corrupt apart."""
        result = read_json(self.path)
        if not result.ok:
            return result
        raw = result.value
        api_key = raw.get("apiKey") if isinstance(raw, dict) else None
        if not isinstance(api_key, str) or not api_key.strip():
            logger.warning("Credential file %s has no usable apiKey", self.path)
            return ReadResult(error=StorageErrorKind.CORRUPT)
        return ReadResult(
            value=Credential(
                api_key=api_key,
                setup_date=str(raw.get("setupDate", "")),
            )
        )

    def load(self) -> Credential | None:
        """Return the saved credential, or None if missing or unreadable."""
        result = self.read()
        if result.error == StorageErrorKind.CORRUPT:
            logger.warning("Ignoring unreadable credential file %s", self.path)
        return result.value_or(None)

    def save(self, api_key: str) -> Credential:
        """Overwrite the credential file with a freshly stamped key."""
        credential = Credential(api_key=api_key, setup_date=utc_now_iso())
        write_json(
            self.path,
            {"apiKey": credential.api_key, "setupDate": credential.setup_date},
        )
        logger.info("Saved API key to %s", self.path)
        return credential
