import asyncio
import logging
import random
import time
from contextlib import aclosing
from typing import Callable, Optional, Sequence

from pydantic import BaseModel

from infinite_wiki.services.art_generator import AsciiArt
from infinite_wiki.services.definition_stream import is_error_fragment
from infinite_wiki.services.fallback_art import create_fallback_art
from infinite_wiki.words import UNIQUE_WORDS

logger = logging.getLogger(__name__)


class WikiState(BaseModel):
    """Everything the page shows for the current topic."""

    topic: str = ""
    epoch: int = 0
    content: str = ""
    is_loading: bool = False
    error: Optional[str] = None
    art: Optional[AsciiArt] = None
    elapsed_ms: Optional[float] = None


def pick_random_topic(words: Sequence[str], current: str, rng=random) -> str:
    """Draw a word uniformly, stepping to the next entry if it repeats ``current``."""
    index = rng.randrange(len(words))
    if words[index].lower() == current.lower():
        index = (index + 1) % len(words)
    return words[index]


class TopicNavigator:
    """Owns the current topic and the two fetches launched for it.

    Every topic change starts a new epoch. Definition fragments and art
    results are tagged with the epoch they were requested for and are only
    applied while that epoch is still the current one, so a slow answer for
    an abandoned topic can never overwrite the page of a newer one.

    In-flight requests are not aborted on a topic change; their results are
    dropped when they arrive.
    """

    def __init__(
        self,
        definitions,
        art,
        on_update: Optional[Callable[[WikiState], None]] = None,
        words: Sequence[str] = UNIQUE_WORDS,
        rng=random,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self._definitions = definitions
        self._art = art
        self._on_update = on_update
        self.words = list(dict.fromkeys(words))
        self._rng = rng
        self._clock = clock
        self._epoch = 0
        self._tasks: set[asyncio.Task] = set()
        self.state = WikiState()

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def topic(self) -> str:
        return self.state.topic

    def search(self, topic: str) -> bool:
        return self.navigate(topic)

    def word_clicked(self, word: str) -> bool:
        return self.navigate(word)

    def random_requested(self) -> bool:
        if not self.words:
            return False
        return self.navigate(pick_random_topic(self.words, self.state.topic, self._rng))

    def navigate(self, topic: str) -> bool:
        """Switch to ``topic`` and launch its fetches.

        Returns False without touching any state when the topic is blank or
        the same as the current one (ignoring case). Must be called from
        inside a running event loop.
        """
        new_topic = (topic or "").strip()
        if not new_topic or new_topic.lower() == self.state.topic.lower():
            logger.debug(f"Ignoring navigation to {topic!r}")
            return False

        self._epoch += 1
        epoch = self._epoch
        started = self._clock()
        self.state = WikiState(topic=new_topic, epoch=epoch, is_loading=True)
        logger.info(f"Navigating to {new_topic!r} (epoch {epoch})")
        self._publish()

        self._spawn(self._load_art(epoch, new_topic))
        self._spawn(self._load_definition(epoch, new_topic, started))
        return True

    async def wait_idle(self):
        """Wait until every fetch launched so far has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def close(self):
        """Invalidate the current epoch and cancel whatever is still running."""
        self._epoch += 1
        for task in list(self._tasks):
            task.cancel()
        await self.wait_idle()

    def _is_current(self, epoch: int) -> bool:
        return epoch == self._epoch

    def _spawn(self, coro):
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _apply(self, epoch: int, **changes) -> bool:
        if not self._is_current(epoch):
            return False
        self.state = self.state.model_copy(update=changes)
        self._publish()
        return True

    def _publish(self):
        if self._on_update is not None:
            self._on_update(self.state)

    async def _load_art(self, epoch: int, topic: str):
        try:
            art = await self._art.generate(topic)
        except Exception as e:
            if not self._is_current(epoch):
                return
            logger.warning(f"Failed to generate ASCII art for {topic!r}, using fallback: {e}")
            art = create_fallback_art(topic)
        self._apply(epoch, art=art)

    async def _load_definition(self, epoch: int, topic: str, started: float):
        content = ""
        try:
            async with aclosing(self._definitions.stream(topic)) as fragments:
                async for fragment in fragments:
                    if not self._is_current(epoch):
                        logger.debug(f"Dropping stale definition stream for {topic!r}")
                        break
                    if is_error_fragment(fragment):
                        self._apply(epoch, error=fragment, content="")
                        break
                    content += fragment
                    self._apply(epoch, content=content)
        except Exception as e:
            if self._is_current(epoch):
                logger.error(f"Definition failed for {topic!r}: {e}", exc_info=True)
                self._apply(epoch, error=str(e) or "An unknown error occurred", content="")
        finally:
            if self._is_current(epoch):
                elapsed_ms = (self._clock() - started) * 1000
                self._apply(epoch, elapsed_ms=elapsed_ms, is_loading=False)
