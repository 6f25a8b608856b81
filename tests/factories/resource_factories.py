import tempfile
import zipfile
from dataclasses import dataclass
from pathlib import Path

import factory
from factory.faker import faker

fake = faker.Faker()


def _make_root_dir() -> Path:
    return Path(tempfile.mkdtemp(prefix="resource_probe_"))


@dataclass
class LocalFile:
    path: Path
    content: bytes


@dataclass
class ArchiveFile:
    path: Path
    members: dict[str, bytes]

    def member_url(self, name: str, scheme: str = "jar") -> str:
        return f"{scheme}:{self.path.as_uri()}!/{name}"


class LocalFileFactory(factory.Factory):
    """A small text file written to disk (under ``root`` or a fresh temp dir)."""

    class Meta:
        model = LocalFile

    root = None
    name = factory.LazyFunction(lambda: fake.file_name(extension="txt"))
    content = factory.LazyFunction(lambda: fake.paragraph().encode("utf-8"))

    @classmethod
    def _create(cls, model_class, *args, **kwargs) -> LocalFile:  # type: ignore[override]
        root: Path = kwargs.pop("root") or _make_root_dir()
        path = root / kwargs.pop("name")
        content: bytes = kwargs.pop("content")
        path.write_bytes(content)
        return model_class(path=path, content=content)


class ArchiveFactory(factory.Factory):
    """A zip archive on disk holding a few text members."""

    class Meta:
        model = ArchiveFile

    root = None
    name = "archive.zip"
    members = factory.LazyFunction(
        lambda: {
            f"docs/{fake.file_name(extension='txt')}": fake.sentence().encode("utf-8"),
            "readme.txt": fake.paragraph().encode("utf-8"),
        }
    )

    @classmethod
    def _create(cls, model_class, *args, **kwargs) -> ArchiveFile:  # type: ignore[override]
        root: Path = kwargs.pop("root") or _make_root_dir()
        path = root / kwargs.pop("name")
        members: dict[str, bytes] = kwargs.pop("members")
        with zipfile.ZipFile(path, "w") as zf:
            for name, data in members.items():
                zf.writestr(name, data)
        return model_class(path=path, members=members)
