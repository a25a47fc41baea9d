from pathlib import Path

from codeed.platform.logger import get_logger

logger = get_logger(__name__)


class LocalStorage:
    """Blobs stored as flat files under one directory, addressed by storage key."""

    def __init__(self, root: str):
        self.root = Path(root)

    def path_for(self, storage_key: str) -> Path:
        # keys are generated server side, never taken from the client
        return self.root / Path(storage_key).name

    def save(self, storage_key: str, contents: bytes) -> Path:
        self.root.mkdir(parents=True, exist_ok=True)
        file_path = self.path_for(storage_key)
        with open(file_path, "wb") as f:
            f.write(contents)
        return file_path

    def exists(self, storage_key: str) -> bool:
        return self.path_for(storage_key).is_file()

    def delete(self, storage_key: str) -> None:
        file_path = self.path_for(storage_key)
        if file_path.exists():
            file_path.unlink()
        else:
            logger.warning(f"Blob already missing: {file_path}")


def storage_key_for(file_id: str, filename: str) -> str:
    return f"{file_id}{Path(filename).suffix.lower()}"
