"""CronJob, Job and Pod snapshot models."""

from pydantic import BaseModel, ConfigDict, Field


class OwnerReferenceInfo(BaseModel):
    """Back-link from a resource to the resource that created it."""

    model_config = ConfigDict(frozen=True)

    uid: str
    kind: str = ""
    name: str = ""
    # Unset on some objects; None never counts as controller.
    controller: bool | None = None


class CronJobInfo(BaseModel):
    """Identity of the target CronJob."""

    model_config = ConfigDict(frozen=True)

    uid: str
    name: str
    namespace: str


class JobInfo(BaseModel):
    """Job identity plus its owner references."""

    model_config = ConfigDict(frozen=True)

    uid: str
    name: str
    namespace: str
    owner_references: list[OwnerReferenceInfo] = Field(default_factory=list)


class PodInfo(BaseModel):
    """Pod selected by a Job's controller-uid label."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str
    phase: str = "Unknown"
