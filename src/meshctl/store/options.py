"""Per-operation option records for ``ResourceStore`` calls.

Every record is immutable and valid when left at its defaults: empty strings
and a zero page size mean "not set". Builders return new records, so chained
calls apply in order and the last write wins.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Options(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class CreateOptions(_Options):
    name: str = ""
    mesh: str = ""

    @classmethod
    def by_key(cls, name: str, mesh: str = "") -> CreateOptions:
        return cls(name=name, mesh=mesh)


class UpdateOptions(_Options):
    """Accepted by ``update``; no settings yet."""


class GetOptions(_Options):
    name: str = ""
    mesh: str = ""

    @classmethod
    def by_key(cls, name: str, mesh: str = "") -> GetOptions:
        return cls(name=name, mesh=mesh)


class DeleteOptions(_Options):
    name: str = ""
    mesh: str = ""

    @classmethod
    def by_key(cls, name: str, mesh: str = "") -> DeleteOptions:
        return cls(name=name, mesh=mesh)


class ListOptions(_Options):
    mesh: str = ""
    page_size: int = Field(default=0, ge=0)
    page_offset: str = ""

    @classmethod
    def by_mesh(cls, mesh: str) -> ListOptions:
        return cls(mesh=mesh)

    def with_mesh(self, mesh: str) -> ListOptions:
        return ListOptions(mesh=mesh, page_size=self.page_size, page_offset=self.page_offset)

    def with_page(self, size: int, offset: str = "") -> ListOptions:
        return ListOptions(mesh=self.mesh, page_size=size, page_offset=offset)

    def query_params(self) -> dict[str, str]:
        """Paging parameters, leaving out anything unset."""
        params: dict[str, str] = {}
        if self.page_size:
            params["size"] = str(self.page_size)
        if self.page_offset:
            params["offset"] = self.page_offset
        return params
