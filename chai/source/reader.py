from __future__ import annotations

import logging
from copy import deepcopy
from pathlib import Path
from typing import AsyncGenerator, Optional, Union

import aiofiles
import cchardet

from ..interpreter.exceptions import StandardError


class SourceReader:

    setting: dict = {
        'encoding': None,
        'chunk_size': 64*1024,
    }

    def __init__(self, setting: Optional[dict] = None) -> None:
        self.setting = deepcopy(self.setting)
        if setting:
            self.setting.update(setting)
        self._logger = logging.getLogger('chai.source')

    def __repr__(self) -> str:
        encoding = self.setting['encoding'] or 'auto'
        return f'<{self.__class__.__name__} encoding={encoding}>'

    async def read(self, path: Union[str, Path]) -> str:
        try:
            chunks = [chunk async for chunk in self._file_gen(Path(path))]
        except OSError as exc:
            raise StandardError(f"Failed to open file '{path}' for reading") from exc
        content = b''.join(chunks)
        self._logger.debug(f'read {len(content)} bytes from {path}')
        return self.decode(path, content)

    def decode(self, path: Union[str, Path], content: bytes) -> str:
        encoding = (self.setting['encoding']
                    or cchardet.detect(content)['encoding']
                    or 'utf-8')
        try:
            return content.decode(encoding)
        except (LookupError, UnicodeDecodeError) as exc:
            raise StandardError(f"Failed to decode file '{path}' as {encoding}") from exc

    async def _file_gen(self, path: Path) -> AsyncGenerator:
        chunk_size = self.setting['chunk_size']
        async with aiofiles.open(path, 'rb') as file:
            chunk = await file.read(chunk_size)
            while chunk:
                yield chunk
                chunk = await file.read(chunk_size)
