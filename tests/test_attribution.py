"""Tests for outlet attribution heuristics."""

from rumor_agent.processors.attribution import infer_source


class TestInferSource:

    def test_via_pattern(self):
        assert infer_source("Brunson wants to stay, via ESPN") == "ESPN"

    def test_via_is_case_insensitive(self):
        assert infer_source("Report VIA The Athletic says otherwise") == "The Athletic"

    def test_via_requires_capitalized_outlet(self):
        assert infer_source("traded via sign-and-trade") == "HoopsHype"

    def test_trailing_dash_attribution(self):
        assert infer_source("Knicks eye another guard - New York Post") == "New York Post"

    def test_trailing_em_dash(self):
        assert infer_source("Lakers want size — Los Angeles Times") == "Los Angeles Times"

    def test_markup_input(self):
        html = '<p>Brunson is happy in New York, via <a href="https://sny.tv/x">SNY</a>.</p>'
        assert infer_source(html) == "SNY"

    def test_default_label(self):
        assert infer_source("No credit anywhere in this one") == "HoopsHype"
        assert infer_source("", default="Unknown") == "Unknown"
