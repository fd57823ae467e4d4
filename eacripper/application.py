"""The services an application hands to its components."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .charsets import CharsetConverter, CharsetDetector, CodepageConverter
from .coders import CoderType, MusicCoderManager
from .component import ComponentInfo
from .files import LocalDirectory, LocalFile
from .identifiers import (
    CHARSET_DETECTOR,
    LOCAL_DIRECTORY,
    LOCAL_FILE,
    STRING_CHARSET_CONVERTER,
    STRING_CODEPAGE_CONVERTER,
    ERUUID,
)


class UnknownServiceError(LookupError):
    """Raised when no service is known for a UUID."""


class ServicePointerManager:
    """Keeps alive the service objects handed out to components."""

    def __init__(self) -> None:
        self._pool: list[Any] = []

    def append(self, obj: Any) -> Any:
        """Hold ``obj`` and return it."""
        self._pool.append(obj)
        return obj

    def remove(self, obj: Any) -> None:
        """Drop the first held reference to ``obj``; unknown objects are ignored."""
        for index, held in enumerate(self._pool):
            if held is obj:
                del self._pool[index]
                return

    def __len__(self) -> int:
        return len(self._pool)

    def __contains__(self, obj: object) -> bool:
        return any(held is obj for held in self._pool)


def _register(manager: MusicCoderManager, allocator: Any, coder_type: CoderType) -> bool:
    coder = allocator.alloc()
    try:
        name = coder.info.name
    finally:
        allocator.free(coder)
    return manager.add_coder((name, coder_type), allocator)


class MusicDecoderRegister:
    """Registers music decoders with a coder manager."""

    def __init__(self, manager: MusicCoderManager) -> None:
        self.manager = manager

    def register_decoder(self, allocator: Any) -> bool:
        return _register(self.manager, allocator, CoderType.DECODER)


class InCueMusicDecoderRegister:
    """Registers decoders that can also read an embedded cue sheet."""

    def __init__(self, manager: MusicCoderManager) -> None:
        self.manager = manager

    def register_incue_decoder(self, allocator: Any) -> bool:
        return _register(self.manager, allocator, CoderType.INCUE_DECODER)


class MusicEncoderRegister:
    """Registers music encoders with a coder manager."""

    def __init__(self, manager: MusicCoderManager) -> None:
        self.manager = manager

    def register_encoder(self, allocator: Any) -> bool:
        return _register(self.manager, allocator, CoderType.ENCODER)


class Application:
    """Hands out services by UUID and keeps the ones it creates until removed."""

    def __init__(
        self,
        pointers: Optional[ServicePointerManager] = None,
        coders: Optional[MusicCoderManager] = None,
    ) -> None:
        self.pointers = pointers if pointers is not None else ServicePointerManager()
        self.coders = coders if coders is not None else MusicCoderManager()
        self.decoder_register = MusicDecoderRegister(self.coders)
        self.incue_decoder_register = InCueMusicDecoderRegister(self.coders)
        self.encoder_register = MusicEncoderRegister(self.coders)
        self.charset_detector = CharsetDetector()
        self.info: Optional[ComponentInfo] = None
        self._factories: dict[ERUUID, Callable[[], Any]] = {
            STRING_CODEPAGE_CONVERTER: CodepageConverter,
            STRING_CHARSET_CONVERTER: CharsetConverter,
            LOCAL_FILE: LocalFile,
            LOCAL_DIRECTORY: LocalDirectory,
        }

    def get_service(self, uuid: ERUUID) -> Any:
        """The service named by ``uuid``; new objects are held until removed."""
        if uuid == CHARSET_DETECTOR:
            return self.charset_detector
        factory = self._factories.get(uuid)
        if factory is None:
            raise UnknownServiceError(f"no service for {uuid}")
        return self.pointers.append(factory())

    def remove_service(self, uuid: ERUUID, obj: Any) -> None:
        """Release a service obtained from :meth:`get_service`."""
        self.pointers.remove(obj)


class ServiceFactory:
    """Obtains a service on creation and releases it when the block ends."""

    def __init__(self, app: Application, uuid: ERUUID) -> None:
        self.app = app
        self.uuid = uuid
        self.service = app.get_service(uuid)

    def __enter__(self) -> Any:
        return self.service

    def __exit__(self, exc_type, exc, tb) -> None:
        self.app.remove_service(self.uuid, self.service)