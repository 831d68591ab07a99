import pytest

from storyreel.core.exceptions import (
    EmptyResponseError,
    GenerationFailedError,
    InfrastructureError,
    MalformedResponseError,
    MissingCredentialError,
    PermissionDeniedError,
    PipelineError,
    StoryReelError,
    VideoDownloadError,
    VideoTimeoutError,
)


@pytest.mark.parametrize(
    "exc_type, base",
    [
        (MissingCredentialError, InfrastructureError),
        (PermissionDeniedError, InfrastructureError),
        (EmptyResponseError, PipelineError),
        (MalformedResponseError, PipelineError),
        (GenerationFailedError, PipelineError),
        (VideoDownloadError, GenerationFailedError),
        (VideoTimeoutError, GenerationFailedError),
    ],
)
def test_hierarchy(exc_type, base):
    assert issubclass(exc_type, base)
    assert issubclass(exc_type, StoryReelError)


def test_missing_credential_default_message():
    assert str(MissingCredentialError()) == "API Key is missing. Please enter it in the settings screen."


def test_video_timeout_carries_durations():
    err = VideoTimeoutError(waited_seconds=905.2, max_wait=900)

    assert err.waited_seconds == 905.2
    assert err.max_wait == 900
    assert "900s" in str(err)
