"""Tests for feature document rendering."""

from stitch.core.document import FEATURE_NAME, SCENARIO_NAME, FeatureDocument
from stitch.core.emit import Step


class TestFeatureDocument:
    """Tests for FeatureDocument.render."""

    def test_empty_document(self):
        """No steps still renders the feature and scenario lines."""
        assert FeatureDocument().render() == (
            "Feature: Generated API Test\n\nScenario: User Test Flow\n"
        )

    def test_steps_indented_in_order(self):
        """Steps are indented two spaces, one per line, in order."""
        document = FeatureDocument(steps=(Step("Given url 'https://x'"), Step("When method GET")))
        assert document.render().splitlines() == [
            f"Feature: {FEATURE_NAME}",
            "",
            f"Scenario: {SCENARIO_NAME}",
            "  Given url 'https://x'",
            "  When method GET",
        ]

    def test_ends_with_newline(self):
        """Rendered text ends with exactly one newline."""
        text = FeatureDocument(steps=(Step("Then status 200"),)).render()
        assert text.endswith("Then status 200\n")
        assert not text.endswith("\n\n")

    def test_str_renders(self):
        """str() is the rendered text."""
        document = FeatureDocument(steps=(Step("Then status 200"),))
        assert str(document) == document.render()

    def test_to_dict(self):
        """to_dict lists titles and step texts."""
        document = FeatureDocument(steps=(Step("Then status 200", node_id="n1"),))
        assert document.to_dict() == {
            "feature_name": "Generated API Test",
            "scenario_name": "User Test Flow",
            "steps": ["Then status 200"],
        }
