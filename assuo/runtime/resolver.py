"""
Source Resolver

Turns source descriptions into bytes. assuo-url / assuo-file sources are
themselves assuo documents: they are loaded and run through the whole
patch workflow, and their output is used as the resolved bytes.
"""
import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from assuo.adapters.toml.importer import TomlImporter
from assuo.config import AssuoConfig
from assuo.core.document.models import (
    Document, Edit, InsertEdit, RemoveEdit, Source,
    BytesSource, TextSource, UrlSource, FileSource, PatchUrlSource, PatchFileSource
)
from assuo.core.errors import ResolutionError
from assuo.core.patch.schema import ResolvedDocument, ResolvedEdit, ResolvedInsert, ResolvedRemove
from assuo.tools.source_client import SourceClient

logger = logging.getLogger(__name__)


class SourceResolver:
    """
    Resolves sources against a base directory.

    `chain` holds the references (absolute paths or URLs) of the documents
    currently being resolved, outermost first; a nested reference already on
    the chain is a cycle. `depth` counts nested documents below the top one.
    """

    def __init__(self, client: Optional[SourceClient] = None, config: Optional[AssuoConfig] = None,
                 base_dir: Optional[Union[str, Path]] = None, chain: Tuple[str, ...] = (),
                 depth: int = 0, importer: Optional[TomlImporter] = None):
        self.config = config or AssuoConfig()
        self.client = client or SourceClient(self.config)
        self.base_dir = Path(base_dir) if base_dir is not None else Path(".")
        self.chain = tuple(chain)
        self.depth = depth
        self.importer = importer or TomlImporter()

    def resolve(self, source: Source) -> bytes:
        """
        Resolve one source to bytes

        Raises:
            ResolutionError: I/O failure, unsupported source, cyclic or too deep nesting
        """
        if isinstance(source, BytesSource):
            return source.data
        if isinstance(source, TextSource):
            return source.text.encode("utf-8")
        if isinstance(source, UrlSource):
            return self.client.fetch(source.url)
        if isinstance(source, FileSource):
            return self.client.read(str(self.base_dir / source.path))
        if isinstance(source, PatchUrlSource):
            return self._resolve_patch_url(source.url)
        if isinstance(source, PatchFileSource):
            return self._resolve_patch_file(source.path)
        raise ResolutionError(f"unimplemented source: {type(source).__name__}")

    def resolve_edit(self, edit: Edit) -> ResolvedEdit:
        """Resolve the source of an insert; removes pass through"""
        if isinstance(edit, InsertEdit):
            return ResolvedInsert(way=edit.way, spot=edit.spot, data=self.resolve(edit.source))
        if isinstance(edit, RemoveEdit):
            return ResolvedRemove(way=edit.way, spot=edit.spot, count=edit.count)
        raise ResolutionError(f"unimplemented edit: {type(edit).__name__}")

    def resolve_document(self, document: Document) -> ResolvedDocument:
        """Resolve the base, then every edit in order"""
        base = self.resolve(document.base)
        edits = [self.resolve_edit(edit) for edit in document.edits]
        return ResolvedDocument(base=base, edits=edits)

    def child(self, reference: str, base_dir: Union[str, Path]) -> 'SourceResolver':
        """Resolver for a nested document, one level deeper"""
        return SourceResolver(
            client=self.client, config=self.config, base_dir=base_dir,
            chain=self.chain + (reference,), depth=self.depth + 1, importer=self.importer
        )

    def _resolve_patch_url(self, url: str) -> bytes:
        self._check_nesting(url)
        data = self.client.fetch(url)
        return self._run_nested(url, data, self.base_dir)

    def _resolve_patch_file(self, path: str) -> bytes:
        full_path = (self.base_dir / path).resolve()
        reference = str(full_path)
        self._check_nesting(reference)
        data = self.client.read(reference)
        return self._run_nested(reference, data, full_path.parent)

    def _check_nesting(self, reference: str):
        if reference in self.chain:
            cycle = " -> ".join(self.chain + (reference,))
            raise ResolutionError(f"cyclic assuo reference: {cycle}", reference)
        if self.depth >= self.config.max_depth:
            raise ResolutionError(
                f"assuo documents nested deeper than {self.config.max_depth} levels at {reference}", reference
            )

    def _run_nested(self, reference: str, data: bytes, base_dir: Path) -> bytes:
        # imported here, the workflow module imports this one
        from assuo.runtime.patch_workflow import PatchWorkflow

        document = self.importer.load_bytes(data)
        logger.info(f"Applying nested assuo document {reference} (depth {self.depth + 1})")
        workflow = PatchWorkflow(resolver=self.child(reference, base_dir))
        return workflow.run(document)
