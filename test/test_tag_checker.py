import json
from unittest.mock import MagicMock, patch

import pytest

import tag_checker
from tagcheck.models import TagCheckResult


@pytest.mark.parametrize("reference,registry,path,tag", [
    ("ghcr.io/org/app:v1", "ghcr.io", "org/app", "v1"),
    ("quay.io/edge-infrastructure/assisted-service:latest-abc", "quay.io", "edge-infrastructure/assisted-service", "latest-abc"),
    ("localhost:5000/app:dev", "localhost:5000", "app", "dev"),
])
def test_parse_reference(reference, registry, path, tag):
    image = tag_checker.parse_reference(reference)
    assert image.registry_url == registry
    assert image.image_path == path
    assert image.tags == [tag]


@pytest.mark.parametrize("reference", ["ghcr.io/org/app", "app:v1", "localhost:5000/app"])
def test_parse_reference_invalid(reference):
    with pytest.raises(ValueError):
        tag_checker.parse_reference(reference)


@pytest.fixture
def mock_service():
    with patch("tag_checker.TagCheckService") as mock:
        service = MagicMock()
        service.missing.return_value = []
        service.failed.return_value = []
        mock.return_value = service
        yield mock, service


def test_main_all_found(mock_service, capsys):
    mock, service = mock_service
    service.results = [TagCheckResult(image="ghcr.io/org/app", tag="v1", exists=True)]

    assert tag_checker.main(["ghcr.io/org/app:v1", "--json"]) == 0

    images = mock.call_args.args[0]
    assert images[0].reference == "ghcr.io/org/app"
    output = json.loads(capsys.readouterr().out)
    assert output == [{"image": "ghcr.io/org/app", "tag": "v1", "exists": True, "error": None}]


def test_main_missing_tag(mock_service, capsys):
    _, service = mock_service
    result = TagCheckResult(image="ghcr.io/org/app", tag="v9", exists=False)
    service.results = [result]
    service.missing.return_value = [result]

    assert tag_checker.main(["ghcr.io/org/app:v9"]) == 1
    assert "ghcr.io/org/app:v9\tmissing" in capsys.readouterr().out


def test_main_reads_images_file(mock_service, tmp_path):
    mock, service = mock_service
    service.results = []
    images_file = tmp_path / "images.yaml"
    images_file.write_text("images:\n  - registry_url: quay.io\n    image_path: ns/repo\n    tags: [a, b]\n")

    assert tag_checker.main(["--images-file", str(images_file)]) == 0
    images = mock.call_args.args[0]
    assert images[0].tags == ["a", "b"]


def test_main_without_images(monkeypatch, mock_service):
    monkeypatch.delenv("IMAGES_FILE", raising=False)
    mock, _ = mock_service
    assert tag_checker.main([]) == 1
    mock.assert_not_called()


def test_main_invalid_reference(mock_service):
    assert tag_checker.main(["not-a-reference"]) == 1
