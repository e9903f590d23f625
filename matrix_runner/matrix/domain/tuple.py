"""ClientTuple — one combination of client configurations under test."""

from pydantic import BaseModel, Field

from matrix_runner.config.domain.client import ClientConfig


class ClientTuple(BaseModel, frozen=True):
    """Immutable, ordered, fixed-size group of clients exercised by one test execution."""

    clients: tuple[ClientConfig, ...] = Field(min_length=1)

    @property
    def size(self) -> int:
        return len(self.clients)

    @property
    def label(self) -> str:
        return " + ".join(client.label for client in self.clients)
