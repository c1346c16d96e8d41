"""Build configuration."""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

CONFIG_FILENAME = "site.yml"

PATH_FIELDS = (
    'blog_content_dir',
    'portfolio_content_dir',
    'blog_output_dir',
    'portfolio_output_dir',
    'data_dir',
    'thumbnail_dir',
    'ad_script_path',
)


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


@dataclass
class SiteConfig:
    """Locations and site constants for a build.

    Relative paths are resolved against ``root`` by :func:`load_config`.
    """
    root: Path = field(default_factory=Path.cwd)
    blog_content_dir: Path = Path("content/blog")
    portfolio_content_dir: Path = Path("content/portfolio")
    blog_output_dir: Path = Path("blog")
    portfolio_output_dir: Path = Path("portfolio")
    data_dir: Path = Path("assets/data")
    thumbnail_dir: Path = Path("assets/img/thumbnails")
    thumbnail_url_prefix: str = "assets/img/thumbnails/"
    ad_script_path: Path = Path("partials/ad-script.html")
    base_url: str = "https://breadmotion.github.io/WebSite"
    site_name: str = "PanKUN"
    author: str = "PanKUN"
    contact_email: str = "pankun.dev@gmail.com"
    blog_locales: List[str] = field(default_factory=lambda: ["ja", "en"])
    x_default_locale: str = "en"
    portfolio_locale: str = "ja"
    fetch_timeout: float = 30

    def __post_init__(self):
        self.root = Path(self.root)
        for name in PATH_FIELDS:
            path = Path(getattr(self, name))
            if not path.is_absolute():
                path = self.root / path
            setattr(self, name, path)
        if not self.blog_locales:
            raise ConfigError("blog_locales must name at least one locale")
        self.base_url = self.base_url.rstrip('/')

    @property
    def base_locale(self) -> str:
        return self.blog_locales[0]

    @property
    def alternate_locales(self) -> List[str]:
        return self.blog_locales[1:]

    def blog_list_path(self, locale: str) -> Path:
        """Index JSON for one blog locale."""
        if locale == self.base_locale:
            return self.data_dir / "blogList.json"
        return self.data_dir / f"blogList_{locale}.json"

    @property
    def portfolio_list_path(self) -> Path:
        return self.data_dir / "portfolioList.json"

    def blog_page_path(self, item_id: str, locale: str) -> Path:
        if locale == self.base_locale:
            return self.blog_output_dir / f"{item_id}.html"
        return self.blog_output_dir / locale / f"{item_id}.html"

    def portfolio_page_path(self, item_id: str) -> Path:
        return self.portfolio_output_dir / f"{item_id}.html"

    def relative(self, path: Path) -> str:
        """Site-root relative POSIX path, as published in index files."""
        try:
            return Path(path).relative_to(self.root).as_posix()
        except ValueError:
            return Path(path).as_posix()

    def read_ad_script(self) -> str:
        if self.ad_script_path.exists():
            return self.ad_script_path.read_text(encoding='utf-8')
        return ""


def load_config(path: Optional[Path] = None, root: Optional[Path] = None) -> SiteConfig:
    """Build a SiteConfig from defaults and an optional YAML file.

    Args:
        path: Config file (default: ``site.yml`` under ``root`` if present)
        root: Site root directory (default: current directory)

    Returns:
        SiteConfig with paths resolved against the root

    Raises:
        ConfigError: If the file is missing, unreadable or has unknown keys
    """
    root = Path(root) if root else Path.cwd()
    overrides: Dict[str, Any] = {}

    if path is None:
        default = root / CONFIG_FILENAME
        path = default if default.exists() else None
    elif not Path(path).exists():
        raise ConfigError(f"Config file not found: {path}")

    if path is not None:
        try:
            data = yaml.safe_load(Path(path).read_text(encoding='utf-8'))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to read config {path}: {e}") from e
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must be a mapping")

        known = {f.name for f in fields(SiteConfig)} - {'root'}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")
        overrides.update(data)

    return SiteConfig(root=root, **overrides)
