"""Integration tests for the RCKClient facade over compute and image.

Every test goes through ``RCKClient`` with ``requests.post`` patched, so the
full path (parameter validation, envelope assembly, transport, status mapping,
output resolution and wrapping) is exercised without network access.
"""

from __future__ import annotations

import json

import pytest

from rck import (
    AnalyzeParams,
    APIError,
    AuthenticationError,
    AutoParams,
    ComputeConfig,
    ComputeResponse,
    Example,
    GenerateParams,
    GenerateTextParams,
    ImageResponse,
    LearnFromExamplesParams,
    NetworkError,
    RCKClient,
    Speed,
    StructuredTransformParams,
    TranslateParams,
    ValidationError,
)
from rck.core.config import RCKConfig

IMAGE_PARAMS = GenerateParams(
    input="a lighthouse",
    frame_composition="wide shot",
    lighting="stormy",
    style="ink",
)


# ---------------------------------------------------------------------------
# Construction.
# ---------------------------------------------------------------------------


class TestConstruction:
    """RCKClient wiring and overrides."""

    def test_api_key_required(self, test_config):
        """An empty key is rejected before anything else happens."""
        with pytest.raises(ValidationError) as exc_info:
            RCKClient("", config=test_config)
        assert exc_info.value.field == "api_key"

    def test_defaults_from_config(self, client):
        """Without overrides the configuration supplies URL and timeout."""
        assert client.base_url == "https://rck.test"
        assert client.timeout == 5000

    def test_overrides(self, test_config):
        """Explicit base URL and timeout win over configuration."""
        custom = RCKClient("k", base_url="http://localhost:1", timeout=750, config=test_config)
        assert custom.base_url == "http://localhost:1"
        assert custom.timeout == 750

    def test_non_positive_timeout_falls_back(self, test_config):
        """A zero timeout keeps the configured default."""
        assert RCKClient("k", timeout=0, config=test_config).timeout == 5000

    def test_endpoint_from_config(self, mock_post):
        """Both namespaces post to the configured endpoint."""
        cfg = RCKConfig(base_url="https://h", endpoint="/v2/run", _env_file=None)
        RCKClient("k", config=cfg).test_connection()
        assert mock_post.call_args.args[0] == "https://h/v2/run"


# ---------------------------------------------------------------------------
# Compute namespace.
# ---------------------------------------------------------------------------


class TestStructuredTransform:
    """client.compute.structured_transform."""

    def test_returns_compute_response(self, client, mock_post, make_response, sent_payload):
        """The standard engine is used and the object output is wrapped."""
        mock_post.return_value = make_response(200, {"output": {"mood": "calm"}})
        schema = {"properties": {"mood": {"type": "string"}}, "type": "object"}
        response = client.compute.structured_transform(
            StructuredTransformParams(input="sea", function_logic="mood", output_data_class=schema),
            ComputeConfig(speed=Speed.QUALITY),
        )
        assert isinstance(response, ComputeResponse)
        assert response.as_map() == {"mood": "calm"}

        payload = sent_payload()
        assert payload["config"] == {"engine": "standard", "speed": "quality"}
        assert json.loads(payload["program"]["Pipeline"]["OutputDataClass"]) == schema

    def test_validation_before_network(self, client, mock_post):
        """Invalid params never reach the transport."""
        with pytest.raises(ValidationError):
            client.compute.structured_transform(StructuredTransformParams(input="x"))
        mock_post.assert_not_called()

    def test_null_output_is_api_error(self, client, mock_post, make_response):
        """A success status with null output fails with an API error."""
        mock_post.return_value = make_response(200, {"output": None})
        with pytest.raises(APIError) as exc_info:
            client.compute.structured_transform(
                StructuredTransformParams(input="x", function_logic="y", output_data_class="{}")
            )
        assert exc_info.value.status_code == 200


class TestAnalyzeAndTranslate:
    """Schema shortcuts over structured transform."""

    def test_analyze_unknown_schema(self, client, mock_post):
        """Unknown output formats fail before any network call."""
        with pytest.raises(ValidationError):
            client.compute.analyze(
                AnalyzeParams(input="x", function_logic="y", output_format="missing")
            )
        mock_post.assert_not_called()

    def test_analyze_sends_schema(self, client, mock_post, sent_payload):
        """The named schema travels as OutputDataClass."""
        client.compute.analyze(
            AnalyzeParams(input="x", function_logic="y", output_format="basic_analysis")
        )
        schema = json.loads(sent_payload()["program"]["Pipeline"]["OutputDataClass"])
        assert schema["required"] == ["emotion", "theme", "analysis"]

    def test_translate(self, client, mock_post, make_response, sent_payload):
        """Translate sends synthesised logic and the translation schema."""
        mock_post.return_value = make_response(200, {"output": {"translation": "hello"}})
        response = client.compute.translate(
            TranslateParams(input="hola", target_language="English", include_cultural_notes=True)
        )
        assert response.as_map()["translation"] == "hello"

        pipeline = sent_payload()["program"]["Pipeline"]
        assert pipeline["FunctionLogic"].startswith("Translate text to English")
        assert pipeline["CustomLogic"]["include_cultural_notes"] == "true"
        assert sent_payload()["config"]["engine"] == "standard"


class TestLearnFromExamples:
    """client.compute.learn_from_examples."""

    def test_examples_are_encoded(self, client, mock_post, sent_payload):
        """Example outputs go over the wire as JSON strings."""
        client.compute.learn_from_examples(
            LearnFromExamplesParams(
                input="new input",
                examples=[Example(input="a", output={"label": "x", "n": [1, 2]})],
            )
        )
        payload = sent_payload()
        assert payload["config"]["engine"] == "attractor"
        encoded = payload["program"]["Pipeline"]["Examples"][0]["output"]
        assert isinstance(encoded, str)
        assert json.loads(encoded) == {"label": "x", "n": [1, 2]}


class TestGenerateText:
    """client.compute.generate_text."""

    def test_string_output(self, client, mock_post, make_response, sent_payload):
        """String output is returned directly on the pure engine."""
        mock_post.return_value = make_response(200, {"output": "Once upon a time"})
        text = client.compute.generate_text(GenerateTextParams(input="x", function_logic="story"))
        assert text == "Once upon a time"
        assert sent_payload()["config"]["engine"] == "pure"

    def test_non_string_output(self, client, mock_post, make_response):
        """Non-string output comes back as its JSON text."""
        mock_post.return_value = make_response(200, {"output": {"text": "hi"}})
        text = client.compute.generate_text(GenerateTextParams(input="x", function_logic="y"))
        assert json.loads(text) == {"text": "hi"}


class TestAuto:
    """client.compute.auto resolves the output type."""

    def test_no_engine_sent(self, client, mock_post, make_response, sent_payload):
        """The payload carries no config."""
        mock_post.return_value = make_response(200, {"output": "done"})
        client.compute.auto(AutoParams(input="x", function_logic="y"))
        assert "config" not in sent_payload()

    def test_text(self, client, mock_post, make_response):
        """String output resolves to plain text."""
        mock_post.return_value = make_response(200, {"output": "hello"})
        assert client.compute.auto(AutoParams(input="x", function_logic="y")) == "hello"

    def test_images(self, client, mock_post, make_response, png_data_url):
        """A string list resolves to an image response, skipping invalid entries."""
        mock_post.return_value = make_response(200, {"output": [png_data_url, "not-a-data-url"]})
        result = client.compute.auto(AutoParams(input="x", style="ink"))
        assert isinstance(result, ImageResponse)
        assert result.count == 1
        assert result.skipped == 1
        assert result.first_image().file_extension == "png"

    def test_structured(self, client, mock_post, make_response):
        """An object resolves to a compute response."""
        mock_post.return_value = make_response(200, {"output": {"a": 1}})
        result = client.compute.auto(AutoParams(input="x", function_logic="y"))
        assert isinstance(result, ComputeResponse)
        assert result.as_map() == {"a": 1}

    def test_malformed(self, client, mock_post, make_response):
        """Output matching no probe is a decoding failure."""
        mock_post.return_value = make_response(200, {"output": 42})
        with pytest.raises(NetworkError, match="failed to determine output type"):
            client.compute.auto(AutoParams(input="x", function_logic="y"))

    def test_missing_output(self, client, mock_post, make_response):
        """A 200 without output is an API error."""
        mock_post.return_value = make_response(200, {})
        with pytest.raises(APIError):
            client.compute.auto(AutoParams(input="x", function_logic="y"))

    def test_validation(self, client, mock_post):
        """Auto without any logic field fails validation locally."""
        with pytest.raises(ValidationError):
            client.compute.auto(AutoParams(input="x"))
        mock_post.assert_not_called()


# ---------------------------------------------------------------------------
# Image namespace.
# ---------------------------------------------------------------------------


class TestImageGenerate:
    """client.image.generate and save_images."""

    def test_generate(self, client, mock_post, make_response, sent_payload, png_data_url):
        """Data URLs decode into an image response on the image engine."""
        mock_post.return_value = make_response(200, {"output": [png_data_url, png_data_url]})
        response = client.image.generate(IMAGE_PARAMS)
        assert response.count == 2
        assert response.success
        assert sent_payload()["config"] == {"engine": "image"}

    def test_generate_rejects_non_list(self, client, mock_post, make_response):
        """Output that is not a string list is an API error."""
        mock_post.return_value = make_response(200, {"output": {"unexpected": True}})
        with pytest.raises(APIError) as exc_info:
            client.image.generate(IMAGE_PARAMS)
        assert exc_info.value.status_code == 200

    def test_generate_validation(self, client, mock_post):
        """Missing style fields fail before the request."""
        with pytest.raises(ValidationError) as exc_info:
            client.image.generate(GenerateParams(input="x"))
        assert exc_info.value.field == "frame_composition"
        mock_post.assert_not_called()

    def test_save_two_images(self, client, mock_post, make_response, png_data_url, temp_dir):
        """Two images are saved as base_1 and base_2 in a fresh directory."""
        mock_post.return_value = make_response(200, {"output": [png_data_url, png_data_url]})
        response = client.image.generate(IMAGE_PARAMS)
        out_dir = temp_dir / "fresh"
        saved, errors = client.image.save_images(response, out_dir, "base")
        assert errors == []
        assert sorted(p.name for p in saved) == ["base_1.png", "base_2.png"]

    def test_save_single_image(self, client, mock_post, make_response, png_data_url, temp_dir):
        """A single image is saved without an index."""
        mock_post.return_value = make_response(200, {"output": [png_data_url]})
        response = client.image.generate(IMAGE_PARAMS)
        saved, errors = client.image.save_images(response, temp_dir, "base")
        assert errors == []
        assert [p.name for p in saved] == ["base.png"]


# ---------------------------------------------------------------------------
# Connection check and error propagation.
# ---------------------------------------------------------------------------


class TestConnection:
    """client.test_connection."""

    def test_success(self, client, mock_post, sent_payload):
        """A successful probe returns quietly and sends the minimal transform."""
        client.test_connection()
        pipeline = sent_payload()["program"]["Pipeline"]
        assert pipeline["FunctionLogic"] == "simple analysis"
        assert json.loads(pipeline["OutputDataClass"])["properties"] == {
            "result": {"type": "string"}
        }

    def test_bad_key(self, client, mock_post, make_response):
        """A 401 surfaces as AuthenticationError."""
        mock_post.return_value = make_response(401, {"error": "nope"})
        with pytest.raises(AuthenticationError):
            client.test_connection()

    def test_per_call_timeout(self, client, mock_post):
        """The per-call deadline is forwarded to the transport."""
        client.test_connection(timeout=100)
        assert mock_post.call_args.kwargs["timeout"] == 0.1
