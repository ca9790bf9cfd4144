from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from cursor_rules.utils.path_constants import DIRECTORIES, README_FILE


class DeployPaths(BaseModel):
    """Resolves every source and target path used by a deployment."""

    model_config = ConfigDict(frozen=True)

    source_dir: Path = Field(default_factory=lambda: Path.cwd())
    target_dir: Path

    @classmethod
    def resolve(cls, target_dir: str | Path, source_dir: str | Path | None = None) -> "DeployPaths":
        """Build a DeployPaths with user-expanded, absolute directories."""
        source = Path(source_dir) if source_dir is not None else Path.cwd()
        return cls(
            source_dir=source.expanduser().absolute(),
            target_dir=Path(target_dir).expanduser().absolute(),
        )

    @property
    def rules_source(self) -> Path:
        """Get the directory the rule files are read from."""
        return self.source_dir / DIRECTORIES["rules"]

    @property
    def rules_target(self) -> Path:
        """Get the directory the rule files are copied into."""
        return self.target_dir / DIRECTORIES["rules"]

    @property
    def docs_source(self) -> Path:
        """Get the optional documentation directory to mirror."""
        return self.source_dir / DIRECTORIES["docs"]

    @property
    def docs_target(self) -> Path:
        return self.target_dir / DIRECTORIES["docs"]

    @property
    def readme_file(self) -> Path:
        return self.target_dir / README_FILE
