"""Operation result models"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Any


class Outcome(Enum):
    """Result of one filesystem action on one artifact"""
    INSTALLED = "installed"
    LINKED = "linked"
    REMOVED = "removed"
    IGNORED = "ignored"
    CANCELED = "canceled"


@dataclass
class ArtifactResult:
    """Outcome for a single artifact of a package"""

    artifact: str
    outcome: Outcome
    destination: Optional[Path] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "artifact": self.artifact,
            "outcome": self.outcome.value,
            "destination": str(self.destination) if self.destination else None,
        }


@dataclass
class PackageResult:
    """Outcomes for every artifact of one package"""

    package_key: str
    artifacts: List[ArtifactResult] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        """Check if every artifact action completed"""
        return self.error is None

    def add(self, artifact: str, outcome: Outcome,
            destination: Optional[Path] = None) -> None:
        """Record an artifact outcome"""
        self.artifacts.append(ArtifactResult(artifact, outcome, destination))

    def outcome(self, artifact: str) -> Optional[Outcome]:
        """Get the recorded outcome for an artifact kind"""
        for result in self.artifacts:
            if result.artifact == artifact:
                return result.outcome
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "package": self.package_key,
            "artifacts": [a.to_dict() for a in self.artifacts],
            "error": self.error,
        }


@dataclass
class RunSummary:
    """Aggregated outcomes of a whole run"""

    action: str
    packages: List[PackageResult] = field(default_factory=list)
    resolution: Optional[Any] = None

    def add(self, result: PackageResult) -> None:
        """Add a package result"""
        self.packages.append(result)

    @property
    def counts(self) -> Dict[Outcome, int]:
        """Number of artifacts per outcome"""
        counter = Counter(
            artifact.outcome
            for package in self.packages
            for artifact in package.artifacts
        )
        return {outcome: counter.get(outcome, 0) for outcome in Outcome}

    @property
    def failures(self) -> List[PackageResult]:
        """Packages whose actions were aborted by an error"""
        return [p for p in self.packages if not p.success]

    @property
    def success(self) -> bool:
        """Check if the run completed without filesystem errors"""
        return not self.failures

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "action": self.action,
            "packages": [p.to_dict() for p in self.packages],
            "counts": {outcome.value: n for outcome, n in self.counts.items()},
        }
