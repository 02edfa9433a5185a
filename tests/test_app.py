"""
Tests for the feed build orchestration.
"""

import pytest

from feed76 import app as app_module
from feed76.app import BuildReport
from feed76.core.interfaces import FetchConnectionError, FetchStatusError


class TestFeedBuilder:
    """Tests for FeedBuilder.build()."""

    async def test_all_feeds_written(self, pages, repository, make_builder, urls):
        """A clean run writes every feed with the shared envelope."""
        report = await make_builder(pages, repository).build()

        assert report.ok
        assert sorted(report.written) == sorted([
            "score.json", "dailyops.json", "axolotl.json", "events.json",
            "nukecodes.json", "minerva.json", "recipes.json",
        ])

        score = await repository.load("score.json")
        assert score['version'] == 1
        assert score['fetchedAt'] == report.fetched_at
        assert score['source'] == urls["home"]
        assert score['daily'][0] == {'title': "Collect 10 Aluminum", 'score': 250}

    async def test_feed_payloads(self, pages, repository, make_builder, urls):
        """Payload keys match the published feed shapes."""
        await make_builder(pages, repository).build()

        daily_ops = await repository.load("dailyops.json")
        assert daily_ops['dailyOps']['mode'] == "uplink"
        assert daily_ops['dailyOps']['location'] == "Vault 94"

        axolotl = await repository.load("axolotl.json")
        assert axolotl['axolotlOfTheMonth']['name'] == "Golden Axolotl"

        nukes = await repository.load("nukecodes.json")
        assert nukes['alpha'] == "12345678"
        assert nukes['resetsIn'] == "2 days 4 hours"
        assert nukes['source'] == urls["nukecodes"]

        minerva = await repository.load("minerva.json")
        assert minerva['location'] == "Foundation"
        assert minerva['inventory'] == []
        assert 'rawSummary' in minerva

        recipes = await repository.load("recipes.json")
        assert recipes == {'version': 1, 'updatedAt': recipes['updatedAt'], 'recipes': []}

    async def test_event_status_added(self, pages, repository, make_builder, urls):
        """Events carry a status resolved in the page timezone."""
        await make_builder(pages, repository).build()
        events = (await repository.load("events.json"))['events']

        assert [e['name'] for e in events] == ["Double XP Weekend", "Mutated Events"]
        # Both calendar entries lie in March 2025
        assert all(e['status'] == "ended" for e in events)

    async def test_fetches_every_source_once(self, pages, repository, make_builder, urls):
        builder = make_builder(pages, repository)
        await builder.build()
        assert sorted(builder.fetcher.requested) == sorted(pages)

    async def test_failed_source_is_isolated(self, pages, repository, make_builder, urls):
        """A failed page skips only its own feeds and keeps their old files."""
        await repository.save("minerva.json", {'version': 1, 'location': "Old"})
        pages[urls["minerva"]] = FetchStatusError(503, urls["minerva"])

        report = await make_builder(pages, repository).build()

        assert not report.ok
        assert list(report.failed) == [urls["minerva"]]
        assert "minerva.json" not in report.written
        assert "score.json" in report.written
        assert "nukecodes.json" in report.written
        assert (await repository.load("minerva.json"))['location'] == "Old"

    async def test_home_failure_skips_home_feeds(self, pages, repository, make_builder, urls):
        pages[urls["home"]] = FetchConnectionError("timeout", urls["home"])

        report = await make_builder(pages, repository).build()

        assert set(report.written) == {"nukecodes.json", "minerva.json", "recipes.json"}
        assert await repository.load("score.json") is None

    async def test_missing_sections_written_as_empty(self, pages, repository, make_builder, urls):
        """A page whose layout drifted still produces valid, empty feeds."""
        pages[urls["home"]] = "Maintenance in progress"

        await make_builder(pages, repository).build()

        assert (await repository.load("score.json"))['daily'] == []
        assert (await repository.load("dailyops.json"))['dailyOps'] is None
        assert (await repository.load("axolotl.json"))['axolotlOfTheMonth'] is None
        assert (await repository.load("events.json"))['events'] == []


class TestMain:
    """Tests for the entry point exit codes."""

    @pytest.mark.parametrize("failed,code", [({}, 0), ({"https://minerva.example/": "503"}, 1)])
    def test_exit_code(self, monkeypatch, tmp_path, failed, code):
        async def fake_run(output_dir):
            return BuildReport(fetched_at="now", written=["recipes.json"], failed=failed)

        monkeypatch.setattr(app_module, "run", fake_run)
        assert app_module.main([str(tmp_path)]) == code
