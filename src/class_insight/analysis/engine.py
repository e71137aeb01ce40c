"""Analysis engine implementing the computation pipeline.

Pipeline:
  Load files (skip failures)
       → Sanitize → Extract declarations → Erase nested types
       → Signature pass → Body pass → Singleton detection → Field pass
       → Method-usage pass
       → Metrics (A_global, I, D, zone)
       → AnalysisResult
"""

from types import MappingProxyType
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from ..architecture.metrics import (
    classify_zone,
    compute_abstractness,
    compute_type_metrics,
)
from ..config import DEFAULT_CONFIG, AnalysisConfig
from ..exceptions import FileAccessError, RetrievalError
from ..logging_config import get_logger
from ..models import AnalysisResult, RelationshipSet, TypeMetrics, TypeReport
from ..relations import (
    TypeRegistry,
    detect_singletons,
    resolve_bodies,
    resolve_fields,
    resolve_method_usages,
    resolve_signatures,
)
from ..scanning import (
    FileMetrics,
    SourceFile,
    erase_nested_types,
    extract_declarations,
    measure_file,
    sanitize,
)

logger = get_logger(__name__)

ContentLoader = Callable[[str], str]


class AnalysisEngine:
    """Runs one analysis pass over a set of source files."""

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def analyze(self, file_paths: Iterable[str], content_loader: ContentLoader) -> AnalysisResult:
        """Load every matching path through *content_loader* and analyze it.

        A path whose content cannot be retrieved is skipped. If there were
        candidate paths and none of them loaded, :class:`RetrievalError` is
        raised. No candidate paths at all gives an empty result.
        """
        paths = list(file_paths)
        candidates = [p for p in paths if self.config.accepts(p)]
        logger.info(f"{len(candidates)} of {len(paths)} files match {self.config.extensions}")

        sources, failed = self.load(candidates, content_loader)
        if candidates and not sources:
            raise RetrievalError(failed)

        return self.run(sources, file_paths=paths, failed_files=failed)

    def load(
        self, paths: Sequence[str], content_loader: ContentLoader
    ) -> Tuple[List[SourceFile], List[str]]:
        """Retrieve file contents sequentially, collecting failures."""
        sources: List[SourceFile] = []
        failed: List[str] = []
        for path in paths:
            try:
                text = content_loader(path)
            except (FileAccessError, OSError, UnicodeDecodeError) as e:
                logger.warning(f"Skipping {path}: {e}")
                failed.append(path)
                continue
            sources.append(SourceFile(name=path, text=text))
        return sources, failed

    def run(
        self,
        sources: Sequence[SourceFile],
        file_paths: Sequence[str] = (),
        failed_files: Sequence[str] = (),
    ) -> AnalysisResult:
        """Run the full pipeline on already loaded sources."""
        config = self.config
        registry = TypeRegistry()
        files: Dict[str, FileMetrics] = {}
        skipped = 0

        # Phase 1: lexical scan per file
        for source in sources:
            sanitized = sanitize(source.text)
            files[source.name] = measure_file(source.name, source.text, sanitized)
            declarations, malformed = extract_declarations(
                source, sanitized, config.modifier_lookback
            )
            skipped += malformed
            erase_nested_types(declarations, sanitized)
            for declaration in declarations:
                registry.register(declaration)

        logger.debug(
            f"Extracted {len(registry.declarations)} declarations "
            f"({len(registry)} distinct types, {skipped} malformed)"
        )

        # Phase 2: relationships and coupling
        if len(registry):
            resolve_signatures(registry)
            resolve_bodies(registry, config.workers)
            detect_singletons(registry, config.singleton_accessors, config.field_lookback)
            resolve_fields(registry, config.field_lookback)
            resolve_method_usages(registry, config.singleton_accessors)
        else:
            logger.info("No types found")

        # Phase 3: metrics
        result = self._build_result(
            registry, files, file_paths or [s.name for s in sources], failed_files, skipped
        )
        logger.info(
            f"Analyzed {len(files)} files, {len(result.types)} types, "
            f"A={result.abstractness:.2f}"
        )
        return result

    def _build_result(
        self,
        registry: TypeRegistry,
        files: Dict[str, FileMetrics],
        file_paths: Sequence[str],
        failed_files: Sequence[str],
        skipped: int,
    ) -> AnalysisResult:
        config = self.config
        states = registry.states
        global_a = compute_abstractness(state.kind for state in states.values())
        derived = compute_type_metrics(
            {name: (state.ca, state.ce) for name, state in states.items()}, global_a
        )

        types: Dict[str, TypeReport] = {}
        for name, state in states.items():
            instability, distance = derived[name]
            flag = 1.0 if state.kind.is_abstract else 0.0
            types[name] = TypeReport(
                name=name,
                kind=state.kind,
                relationships=RelationshipSet.from_relations(state.relations),
                metrics=TypeMetrics(
                    ca=state.ca,
                    ce=state.ce,
                    abstractness=flag,
                    instability=instability,
                    distance=distance,
                    zone=classify_zone(
                        flag,
                        instability,
                        config.zone_abstractness_threshold,
                        config.zone_instability_threshold,
                    ),
                ),
                singleton=state.singleton,
            )

        return AnalysisResult(
            files=MappingProxyType(files),
            types=MappingProxyType(types),
            abstractness=global_a,
            file_paths=tuple(file_paths),
            failed_files=tuple(failed_files),
            skipped_declarations=skipped,
        )
