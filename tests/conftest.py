import pytest

ENV_VARS = [
    "SUBCONVERT_ENCODING",
    "SUBCONVERT_FONT_SIZE",
    "SUBCONVERT_FONT_COLOR",
    "SUBCONVERT_BACKGROUND_ALPHA",
    "SUBCONVERT_BACKGROUND_COLOR",
    "SUBCONVERT_STROKE",
    "SUBCONVERT_LOCATION",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
