"""Link checking pipeline.

    scan → load (parallel) → index (barrier) → resolve (parallel) → report

Both parallel phases fan out over a thread pool and fan back in by document
position, so a report never depends on which worker finished first.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import TypeVar

from linkgate.config import Settings
from linkgate.exceptions import DocumentLoadError, TraversalError
from linkgate.index import DocumentIndex
from linkgate.loader import load_document
from linkgate.markdown import MarkdownParser
from linkgate.models import CheckReport, Document, LinkError, LoadError, ResolveFailure
from linkgate.paths import PathNormalizer
from linkgate.resolver import LinkResolver
from linkgate.scanner import scan_documents

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

# Outcome of one load task: the document, or the record of why it failed
LoadOutcome = Document | LoadError
# Outcome of one resolve task: link errors plus an optional traversal failure
ResolveOutcome = tuple[list[LinkError], ResolveFailure | None]


def run_ordered(func: Callable[[T], R], items: Sequence[T], max_workers: int) -> list[R]:
    """Run ``func`` over ``items`` in a thread pool; results keep the input order."""
    if not items:
        return []
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(func, item): i for i, item in enumerate(items)}
        results_map: dict[int, R] = {}
        for future in as_completed(futures):
            results_map[futures[future]] = future.result()
    return [results_map[i] for i in range(len(items))]


class LinkChecker:
    """Runs the full link check for one set of settings.

    Collaborators (parser, normalizer) are created per checker, never shared
    between runs.
    """

    def __init__(self, settings: Settings, *, parser: MarkdownParser | None = None) -> None:
        self.settings = settings
        self.parser = parser or MarkdownParser()
        self.normalizer = PathNormalizer(settings.roots, settings.extensions)

    # -------------------------------------------------------------------------
    # Phases
    # -------------------------------------------------------------------------

    def scan(self) -> list[Path]:
        """List document paths under all roots (fatal on failure)."""
        roots = [root.source for root in self.settings.roots]
        return scan_documents(roots, self.settings.extensions)

    def load_one(self, path: Path) -> LoadOutcome:
        """Load one document; failures become a :class:`LoadError` record."""
        try:
            return load_document(path, normalizer=self.normalizer, parser=self.parser)
        except DocumentLoadError as e:
            logger.error("Error loading %s: %s", path, e)
            return LoadError(path=path, message=str(e), error_type=type(e).__name__)

    def load(self, paths: Sequence[Path]) -> list[LoadOutcome]:
        return run_ordered(self.load_one, paths, self.settings.worker_count)

    def build_resolver(self, documents: Sequence[Document]) -> LinkResolver:
        index = DocumentIndex.from_documents(documents)
        logger.debug("Indexed %d documents", len(index))
        return LinkResolver(
            index,
            docs_path=self.settings.docs_path,
            ignore_paths=self.settings.ignore_paths,
            excluded_hashes=self.settings.excluded_hashes,
        )

    def resolve_one(self, resolver: LinkResolver, document: Document) -> ResolveOutcome:
        """Check the links of one document; failures are recorded, not raised."""
        try:
            tree = self.parser.render_to_tree(document.body)
            return resolver.resolve(document, tree), None
        except TraversalError as e:
            return e.partial_errors, ResolveFailure(document.key, document.path, str(e))
        except Exception as e:
            logger.error("Error rendering %s: %s", document.path, e)
            return [], ResolveFailure(document.key, document.path, f"Cannot render: {e}")

    # -------------------------------------------------------------------------
    # Full run
    # -------------------------------------------------------------------------

    def run(self) -> CheckReport:
        """
        Check every document under the configured roots.

        Returns:
            CheckReport with link errors, load errors and resolve failures,
            each in document enumeration order

        Raises:
            ScanError: If a documentation root cannot be scanned
        """
        paths = self.scan()
        logger.info("Checking %d documents", len(paths))

        outcomes = self.load(paths)
        documents = [o for o in outcomes if isinstance(o, Document)]
        load_errors = [o for o in outcomes if isinstance(o, LoadError)]

        # Barrier: every load finished before the index exists
        resolver = self.build_resolver(documents)

        def resolve(document: Document) -> ResolveOutcome:
            return self.resolve_one(resolver, document)

        results = run_ordered(resolve, documents, self.settings.worker_count)

        link_errors: list[LinkError] = []
        resolve_failures: list[ResolveFailure] = []
        for errors, failure in results:
            link_errors.extend(errors)
            if failure is not None:
                resolve_failures.append(failure)

        logger.info(
            "Found %d broken links, %d load errors, %d resolve failures",
            len(link_errors),
            len(load_errors),
            len(resolve_failures),
        )
        return CheckReport(
            documents=len(paths),
            link_errors=tuple(link_errors),
            load_errors=tuple(load_errors),
            resolve_failures=tuple(resolve_failures),
            fail_on_load_error=self.settings.fail_on_load_error,
            fail_on_resolve_error=self.settings.fail_on_resolve_error,
        )


def collect_link_errors(settings: Settings) -> list[LinkError]:
    """Run a check and return only the link errors."""
    return list(LinkChecker(settings).run().link_errors)
