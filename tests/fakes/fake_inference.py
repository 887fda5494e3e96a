"""
Fake Dependency Inference Providers for Unit Testing

- StaticInferenceProvider: returns a fixed mapping, records calls.
- ReferenceScanningProvider: infers a dependency for every resource/module
  referenced anywhere in a resource body (nested resources excluded), which is
  close enough to the compiler's behavior for the documents built in tests.
"""

from deplint.ports import InferredDependencyMap
from deplint.semantics import DeclaredSymbol, ModuleSymbol, ResourceDependency, ResourceSymbol, SemanticModel
from deplint.syntax import DEPENDS_ON_PROPERTY_NAME, ArrayAccessSyntax, walk


class StaticInferenceProvider:
    """DependencyInferenceProvider returning a precomputed mapping."""

    def __init__(self, dependencies: InferredDependencyMap | None = None):
        self.dependencies: InferredDependencyMap = dependencies or {}
        self.calls: list[bool] = []

    def compute_inferred_dependencies(self, model, ignore_explicit_depends_on: bool) -> InferredDependencyMap:
        self.calls.append(ignore_explicit_depends_on)
        return self.dependencies


class ReferenceScanningProvider:
    """DependencyInferenceProvider scanning resource bodies for references."""

    def __init__(self):
        self.calls: list[bool] = []

    def compute_inferred_dependencies(
        self,
        model: SemanticModel,
        ignore_explicit_depends_on: bool,
    ) -> InferredDependencyMap:
        self.calls.append(ignore_explicit_depends_on)
        result: dict[DeclaredSymbol, frozenset[ResourceDependency]] = {}

        for declaration in model.resource_declarations():
            source = model.get_symbol_info(declaration)
            body = declaration.try_get_body()
            if source is None or body is None:
                continue

            dependencies: set[ResourceDependency] = set()
            for prop in body.properties:
                if ignore_explicit_depends_on and prop.try_get_key_text() == DEPENDS_ON_PROPERTY_NAME:
                    continue
                for node in walk(prop.value):
                    if isinstance(node, ArrayAccessSyntax):
                        target = model.get_symbol_info(node.base_expression)
                        if isinstance(target, (ResourceSymbol, ModuleSymbol)):
                            dependencies.add(ResourceDependency(source, target, node.index_expression))
                        continue
                    target = model.get_symbol_info(node)
                    if isinstance(target, (ResourceSymbol, ModuleSymbol)) and target is not source:
                        dependencies.add(ResourceDependency(source, target))

            if dependencies:
                result[source] = frozenset(dependencies)

        return result


def dependencies_by_name(document, mapping: dict[str, list[str]]) -> InferredDependencyMap:
    """Build an InferredDependencyMap from names, e.g. {"web": ["plan"]}."""
    return {
        document.symbol(source): frozenset(
            ResourceDependency(document.symbol(source), document.symbol(target)) for target in targets
        )
        for source, targets in mapping.items()
    }
