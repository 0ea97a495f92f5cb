from __future__ import annotations

from abc import ABC, abstractmethod

from termchart.raster import Buffer


class RenderTarget(ABC):
    @abstractmethod
    def start(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def present(self, buffer: Buffer) -> None:
        raise NotImplementedError

    @abstractmethod
    def stop(self) -> None:
        raise NotImplementedError
