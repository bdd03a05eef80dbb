"""
Patch Workflow

Workflow: Document → Resolve → Patch Engine → bytes

Everything is resolved before the first edit is applied. Nested assuo
documents re-enter this workflow through the resolver.
"""
import logging
from pathlib import Path
from typing import Optional, Union

from assuo.adapters.toml.importer import TomlImporter
from assuo.config import AssuoConfig
from assuo.core.document.models import Document
from assuo.core.patch.engine import PatchEngine
from .resolver import SourceResolver

logger = logging.getLogger(__name__)


class PatchWorkflow:
    """
    Patch workflow manager

    Handles the complete run: load → resolve → apply
    """

    def __init__(self, resolver: Optional[SourceResolver] = None, engine: Optional[PatchEngine] = None,
                 config: Optional[AssuoConfig] = None):
        """
        Initialize patch workflow

        Args:
            resolver: Source resolver (creates one from `config` if None)
            engine: Patch engine instance
            config: Settings used when no resolver is given
        """
        self.resolver = resolver or SourceResolver(config=config)
        self.config = self.resolver.config
        self.engine = engine or PatchEngine()

    @property
    def importer(self) -> TomlImporter:
        return self.resolver.importer

    def run(self, document: Document) -> bytes:
        """
        Run the complete workflow on an in-memory document

        Args:
            document: Document to apply

        Returns:
            Patched bytes
        """
        # Step 1: resolve base and every edit source
        resolved = self.resolver.resolve_document(document)
        logger.debug(f"Resolved base of {len(resolved.base)} byte(s) and {len(resolved.edits)} edit(s)")

        # Step 2: apply
        return self.engine.apply_document(resolved)

    def run_text(self, text: str) -> bytes:
        """Run a TOML document given as text; relative paths resolve against the resolver's base_dir"""
        return self.run(self.importer.load_text(text))

    def run_file(self, path: Union[str, Path]) -> bytes:
        """
        Run a TOML document from disk

        Relative file / assuo-file paths inside it resolve against the
        document's own directory.
        """
        full_path = Path(path).resolve()
        reference = str(full_path)
        document = self.importer.load_bytes(self.resolver.client.read(reference))
        return self._for_reference(reference, full_path.parent).run(document)

    def run_url(self, url: str) -> bytes:
        """Run a TOML document fetched from `url`"""
        document = self.importer.load_bytes(self.resolver.client.fetch(url))
        return self._for_reference(url, self.resolver.base_dir).run(document)

    def _for_reference(self, reference: str, base_dir: Path) -> 'PatchWorkflow':
        """Workflow whose resolver knows `reference` is the document being run"""
        resolver = SourceResolver(
            client=self.resolver.client, config=self.config, base_dir=base_dir,
            chain=self.resolver.chain + (reference,), depth=self.resolver.depth,
            importer=self.resolver.importer
        )
        return PatchWorkflow(resolver=resolver, engine=self.engine)
