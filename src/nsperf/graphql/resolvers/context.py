import strawberry

from ...storage import PerformanceRepository
from ..loaders import Loaders


def get_repository(info: strawberry.Info) -> PerformanceRepository:
    return info.context["repository"]


def get_loaders(info: strawberry.Info) -> Loaders:
    return info.context["loaders"]
