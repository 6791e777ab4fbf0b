import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def default_scores_path():
    override = os.environ.get("SHADOW_STRIKE_SCORES")
    if override:
        return Path(override)
    return Path.home() / ".shadow_strike" / "scores.json"


def _parse_score(text):
    try:
        value = int(str(text).strip())
    except (TypeError, ValueError):
        return 0
    return max(0, value)


class InMemoryHighScoreStore:
    def __init__(self, initial=None):
        self._values = dict(initial or {})

    def read(self, key):
        return _parse_score(self._values.get(key, 0))

    def write(self, key, value):
        self._values[key] = str(int(value))


class JsonHighScoreStore:
    """
    Key/value high scores in a small JSON file. Values are stored as text.
    A missing or unreadable file reads as zero; failed writes are logged and dropped.
    """

    def __init__(self, path=None):
        self.path = Path(path) if path is not None else default_scores_path()

    def _load(self):
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object in {self.path}")
        return data

    def read(self, key):
        try:
            data = self._load()
        except (OSError, ValueError) as e:
            logger.warning("Could not read high scores from %s: %s", self.path, e)
            return 0
        return _parse_score(data.get(key, 0))

    def write(self, key, value):
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            try:
                data = self._load()
            except ValueError:
                data = {}
            data[key] = str(int(value))

            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Write temp then replace so a crash never leaves a half-written file.
            tmp.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            logger.warning("Could not save high score to %s: %s", self.path, e)
            try:
                if tmp.exists():
                    tmp.unlink()
            except OSError:
                pass
