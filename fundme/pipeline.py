from collections import OrderedDict
from typing import Callable, FrozenSet, Iterable, List, NamedTuple, Set

from fundme.params import ContractHandle, Deployer
from fundme.utils import DeploymentConfigError


class DeploymentStep(NamedTuple):
    name: str
    tags: FrozenSet[str]
    func: Callable[..., ContractHandle]


class DeploymentPipeline:
    """
    An ordered set of tagged deployment steps. Tooling selects which steps
    to run by tag, e.g. "all" or "fundme".
    """

    def __init__(self):
        self._steps = OrderedDict()

    def step(self, name: str, tags: Iterable[str]):
        """Registers the decorated function as a deployment step."""

        def decorator(func: Callable[..., ContractHandle]) -> Callable[..., ContractHandle]:
            if name in self._steps:
                raise DeploymentConfigError(f"Deployment step '{name}' is already registered.")
            self._steps[name] = DeploymentStep(name=name, tags=frozenset(tags), func=func)
            return func

        return decorator

    @property
    def tags(self) -> Set[str]:
        tags = set()
        for step in self._steps.values():
            tags |= step.tags
        return tags

    def select(self, tags: Iterable[str]) -> List[DeploymentStep]:
        tags = set(tags)
        unknown = tags - self.tags
        if unknown:
            raise DeploymentConfigError(
                f"Unknown deployment tags {sorted(unknown)}; available: {sorted(self.tags)}"
            )
        return [step for step in self._steps.values() if step.tags & tags]

    def run(
        self, tags: Iterable[str], deployer: Deployer, provider, explorer
    ) -> List[ContractHandle]:
        handles = list()
        for step in self.select(tags):
            print(f"\n(i) Running deployment step '{step.name}' ({', '.join(sorted(step.tags))})")
            handles.append(step.func(deployer=deployer, provider=provider, explorer=explorer))
        return handles


PIPELINE = DeploymentPipeline()
