"""ShellTranslator against a mocked subprocess."""

from __future__ import annotations

import asyncio
import unittest
from unittest.mock import AsyncMock, MagicMock, patch

from translator.errors import EngineError
from translator.shell import ShellTranslator


def _process(stdout: bytes = b"", stderr: bytes = b"", returncode: int = 0) -> MagicMock:
    process = MagicMock()
    process.communicate = AsyncMock(return_value=(stdout, stderr))
    process.wait = AsyncMock(return_value=returncode)
    process.returncode = returncode
    return process


class TestTranslate(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.translator = ShellTranslator("/usr/bin/trans")

    async def test_invocation_arguments_and_normalized_output(self):
        process = _process(stdout=b"  Haus\n", stderr=b"warning: slow network")
        with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=process)) as spawn:
            result = await self.translator.translate("house", "de", "bing")

        self.assertEqual(result, "haus")
        args = spawn.call_args.args
        self.assertEqual(args, ("/usr/bin/trans", "-e", "bing", "-b", ":de", "house"))

    async def test_non_zero_exit_is_an_error(self):
        with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=_process(b"haus", returncode=1))):
            with self.assertRaises(EngineError) as ctx:
                await self.translator.translate("house", "de", "google")
        self.assertEqual(ctx.exception.engine, "google")

    async def test_empty_reply_is_an_error(self):
        with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=_process(b"  \n"))):
            with self.assertRaises(EngineError) as ctx:
                await self.translator.translate("house", "de", "google")
        self.assertIn("empty reply from API", str(ctx.exception))

    async def test_stderr_is_not_part_of_the_result(self):
        with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=_process(b"", b"haus"))):
            with self.assertRaises(EngineError):
                await self.translator.translate("house", "de", "google")

    async def test_launch_failure_is_an_error(self):
        with patch("asyncio.create_subprocess_exec", AsyncMock(side_effect=FileNotFoundError("no such file"))):
            with self.assertRaises(EngineError) as ctx:
                await self.translator.translate("house", "de", "google")
        self.assertIn("failed to launch", str(ctx.exception))

    async def test_timeout_kills_process(self):
        translator = ShellTranslator("/usr/bin/trans", timeout=0.01)
        process = _process()

        async def hang():
            await asyncio.sleep(1)

        process.communicate = AsyncMock(side_effect=hang)
        with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=process)):
            with self.assertRaises(EngineError) as ctx:
                await translator.translate("house", "de", "google")
        process.kill.assert_called_once()
        self.assertIn("timed out", str(ctx.exception))


class TestListEngines(unittest.IsolatedAsyncioTestCase):
    async def test_runs_list_mode(self):
        process = _process(stdout=b"google\nbing\n")
        translator = ShellTranslator("/usr/bin/trans")
        with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=process)) as spawn:
            output = await translator.list_engines()

        self.assertEqual(output, "google\nbing\n")
        self.assertEqual(spawn.call_args.args, ("/usr/bin/trans", "-S"))

    async def test_failed_listing_raises(self):
        translator = ShellTranslator("/usr/bin/trans")
        with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=_process(returncode=2))):
            with self.assertRaises(EngineError):
                await translator.list_engines()


if __name__ == "__main__":
    unittest.main()
