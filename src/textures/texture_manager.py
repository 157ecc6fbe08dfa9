"""Progressive sprite loading.

The game never waits on disk: every frame the engine calls `poll()`, which
loads a handful of sprites, and the game asks `image_size()` for each sprite
it needs. Sprites that are queued report `AssetStillLoading`, sprites that
failed report `AssetLoadFailure` with the reason.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Dict, Iterable, Optional, Tuple

from config import LOAD_BATCH
from core.errors import AssetLoadFailure, AssetStillLoading
from textures.resoucepath import SPRITE_NAMES, SPRITES_PATH, sprite_path

Loader = Callable[[str], Tuple[int, Tuple[int, int]]]


class TextureManager:
    def __init__(
        self,
        names: Iterable[str] = SPRITE_NAMES,
        base_path: str = SPRITES_PATH,
        loader: Optional[Loader] = None,
        batch: int = LOAD_BATCH,
    ) -> None:
        if loader is None:
            from textures.texture_utils import load_texture as loader
        self.base_path = base_path
        self.loader = loader
        self.batch = max(1, batch)
        self._pending: Deque[str] = deque(names)
        self._textures: Dict[str, int] = {}
        self._sizes: Dict[str, Tuple[int, int]] = {}
        self._failures: Dict[str, str] = {}

    @property
    def done(self) -> bool:
        return not self._pending

    def poll(self) -> int:
        """Load up to `batch` queued sprites. Returns how many were tried."""
        return self._load(self.batch)

    def reload(self) -> int:
        """Upload every loaded sprite again, all at once.

        Needed after the window is recreated, since its GL context (and with
        it every texture) may be new.
        """
        names = list(self._sizes)
        self._textures.clear()
        self._sizes.clear()
        self._pending.extendleft(reversed(names))
        print(f"[Textures] re-uploading {len(names)} sprites")
        return self._load(len(names))

    def _load(self, limit: int) -> int:
        tried = 0
        while self._pending and tried < limit:
            name = self._pending.popleft()
            tried += 1
            path = sprite_path(name, self.base_path)
            try:
                tex_id, size = self.loader(path)
            except (OSError, ValueError, RuntimeError) as e:
                # pygame.error is a RuntimeError
                print(f"[Textures] failed to load {path}: {e}")
                self._failures[name] = str(e)
                continue
            self._textures[name] = tex_id
            self._sizes[name] = size
        if tried and self.done:
            print(f"[Textures] {len(self._sizes)} sprites loaded, {len(self._failures)} failed")
        return tried

    def image_size(self, name: str) -> Tuple[int, int]:
        size = self._sizes.get(name)
        if size is not None:
            return size
        if name in self._failures:
            raise AssetLoadFailure(name, self._failures[name])
        if name in self._pending:
            raise AssetStillLoading(name)
        raise AssetLoadFailure(name)

    def texture(self, name: str) -> int:
        self.image_size(name)
        return self._textures[name]
