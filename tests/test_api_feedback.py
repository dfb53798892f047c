"""
Tests for Claude coaching feedback (client is stubbed)
"""

import json
from types import SimpleNamespace

import pytest
from exam_scoring.scorers import ScoreReport
from exam_scoring.scorers import api_feedback
from exam_scoring.scorers.api_feedback import generate_feedback_with_api


class FakeClient:
    """Stands in for anthropic.Anthropic; records the request"""

    def __init__(self, text):
        self.text = text
        self.requests = []
        self.messages = SimpleNamespace(create=self._create)

    def _create(self, **kwargs):
        self.requests.append(kwargs)
        return SimpleNamespace(content=[SimpleNamespace(text=self.text)])


@pytest.fixture
def report():
    return ScoreReport(
        score=9.0, max_score=15.0,
        subscores={'content': 4.0, 'pronunciation': 3.0, 'fluency': 2.0},
        feedback=["Good effort!"],
    )


def _install(monkeypatch, text):
    client = FakeClient(text)
    monkeypatch.setattr(api_feedback, 'Anthropic', lambda api_key: client)
    return client


class TestApiFeedback:
    """Test request building and response parsing"""

    def test_plain_json(self, monkeypatch, report):
        client = _install(monkeypatch, json.dumps({'feedback': ["Slow down.", "Stress key words."]}))

        feedback = generate_feedback_with_api(report, 'read_aloud', api_key="test-key")

        assert feedback == ["Slow down.", "Stress key words."]
        prompt = client.requests[0]['messages'][0]['content']
        assert 'read_aloud' in prompt
        assert '9.0 / 15.0' in prompt
        assert 'fluency=2.0' in prompt

    def test_fenced_json(self, monkeypatch, report):
        _install(monkeypatch, '```json\n{"feedback": ["Keep going."]}\n```')
        assert generate_feedback_with_api(report, 'read_aloud', api_key="test-key") == ["Keep going."]

    def test_report_is_unchanged(self, monkeypatch, report):
        _install(monkeypatch, '{"feedback": ["Keep going."]}')
        generate_feedback_with_api(report, 'read_aloud', api_key="test-key")
        assert report.score == 9.0
        assert report.feedback == ["Good effort!"]

    def test_not_json(self, monkeypatch, report):
        _install(monkeypatch, "Great job overall!")
        with pytest.raises(ValueError, match="Failed to parse"):
            generate_feedback_with_api(report, 'read_aloud', api_key="test-key")

    def test_missing_feedback_list(self, monkeypatch, report):
        _install(monkeypatch, '{"advice": "Slow down."}')
        with pytest.raises(ValueError, match="no feedback list"):
            generate_feedback_with_api(report, 'read_aloud', api_key="test-key")

    def test_missing_key(self, monkeypatch, report):
        monkeypatch.delenv('ANTHROPIC_API_KEY', raising=False)
        with pytest.raises(ValueError, match="ANTHROPIC_API_KEY"):
            generate_feedback_with_api(report, 'read_aloud')

    def test_key_from_environment(self, monkeypatch, report):
        seen = {}
        client = FakeClient('{"feedback": []}')

        def factory(api_key):
            seen['key'] = api_key
            return client

        monkeypatch.setenv('ANTHROPIC_API_KEY', "env-key")
        monkeypatch.setattr(api_feedback, 'Anthropic', factory)

        assert generate_feedback_with_api(report, 'read_aloud') == []
        assert seen['key'] == "env-key"
