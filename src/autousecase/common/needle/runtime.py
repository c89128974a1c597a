import os
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from .loader import Loader
from .pointer import SemanticPointer

ASSETS_ROOT = Path(__file__).parent.parent / "assets"
LANG_ENV_VAR = "AUTOUSECASE_LANG"
DEFAULT_LANG = "en"
OVERRIDE_DIR = ".autousecase"


class Needle:
    """
    Resolves message ids to templates.

    Every root contributes `needle/<lang>/` and the project override directory
    `.autousecase/needle/<lang>/`. Later roots win over earlier ones, so a
    project root added with `add_root` can reword the shipped messages.
    """

    def __init__(
        self, roots: Optional[Iterable[Path]] = None, default_lang: str = DEFAULT_LANG
    ):
        self.roots = list(roots) if roots is not None else [ASSETS_ROOT]
        self.default_lang = default_lang
        self._loader = Loader()
        self._catalogs: Dict[str, Dict[str, str]] = {}

    def add_root(self, path: Path):
        if path not in self.roots:
            self.roots.append(path)
            self._catalogs.clear()

    def _catalog(self, lang: str) -> Dict[str, str]:
        if lang not in self._catalogs:
            merged: Dict[str, str] = {}
            for root in self.roots:
                for base in (root, root / OVERRIDE_DIR):
                    merged.update(self._loader.load_directory(base / "needle" / lang))
            self._catalogs[lang] = merged
        return self._catalogs[lang]

    def get(
        self, pointer: Union[SemanticPointer, str], lang: Optional[str] = None
    ) -> str:
        """Target language first, then the default language, then the id itself."""
        key = str(pointer)
        target_lang = lang or os.getenv(LANG_ENV_VAR) or self.default_lang

        for candidate in dict.fromkeys((target_lang, self.default_lang)):
            template = self._catalog(candidate).get(key)
            if template is not None:
                return template
        return key


needle = Needle()
