"""Test doubles for the Gemini SDK client and the navigator's collaborators."""

import asyncio
from types import SimpleNamespace


class FakeModels:
    """Stands in for ``client.aio.models``.

    ``responses`` feeds generate_content: strings become ``response.text``,
    exceptions are raised. ``chunks`` feeds generate_content_stream the same
    way, one item per streamed chunk.
    """

    def __init__(self, responses=None, chunks=None, stream_error=None):
        self.responses = list(responses or [])
        self.chunks = list(chunks or [])
        self.stream_error = stream_error
        self.calls = []

    async def generate_content(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return SimpleNamespace(text=item)

    async def generate_content_stream(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.stream_error is not None:
            raise self.stream_error

        async def chunks():
            for item in self.chunks:
                if isinstance(item, Exception):
                    raise item
                yield SimpleNamespace(text=item)

        return chunks()


class FakeClient:
    def __init__(self, **kwargs):
        self.models = FakeModels(**kwargs)
        self.aio = SimpleNamespace(models=self.models)


class FakeDefinitions:
    """Scripted definition streams keyed by topic.

    A script item that is an exception is raised at that point of the stream.
    A gate (asyncio.Event) holds the stream back until it is set.
    """

    def __init__(self, scripts, gates=None):
        self.scripts = scripts
        self.gates = gates or {}
        self.calls = []

    async def stream(self, topic):
        self.calls.append(topic)
        gate = self.gates.get(topic)
        if gate is not None:
            await gate.wait()
        for item in self.scripts.get(topic, []):
            await asyncio.sleep(0)
            if isinstance(item, Exception):
                raise item
            yield item


class FakeArt:
    """Scripted art results keyed by topic; exceptions are raised."""

    def __init__(self, results, gates=None):
        self.results = results
        self.gates = gates or {}
        self.calls = []

    async def generate(self, topic):
        self.calls.append(topic)
        gate = self.gates.get(topic)
        if gate is not None:
            await gate.wait()
        await asyncio.sleep(0)
        result = self.results[topic]
        if isinstance(result, Exception):
            raise result
        return result


class FixedRandom:
    """randrange() always answers ``index``."""

    def __init__(self, index):
        self.index = index
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return self.index


async def collect(fragments):
    return [fragment async for fragment in fragments]
