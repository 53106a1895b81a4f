import os
from typing import Any, List, Tuple

import pytest

from libmultiformats import HasherRegistry

_MULTIBASE_DATA_DIR = os.path.join(os.path.dirname(__file__), '..', 'data', 'multibase')


def _unquote(value: str) -> str:
    return value.strip().strip('"').replace('\\x00', '\x00')


def load_csv_data_fixtures(dir_path: str = _MULTIBASE_DATA_DIR) -> List[Tuple[str, Any]]:
    """Load multibase vectors as ``(id, (encoding, input, expected, canonical))``.

    The header line of each file holds the decoded value; a header of
    ``non-canonical encoding`` marks vectors that only have to decode.
    """
    fixtures = []
    for file in sorted(os.listdir(dir_path)):
        if not file.endswith('.csv'):
            continue

        with open(os.path.join(dir_path, file), encoding='utf-8') as f:
            header, value = f.readline().split(',', 1)
            canonical = header.strip() != 'non-canonical encoding'
            data = _unquote(value).encode('utf-8')

            for line in f:
                if not line.strip():
                    continue

                encoding, expected = line.split(',', 1)
                encoding = encoding.strip()
                fixtures.append((f'{file}:{encoding}', (encoding, data, _unquote(expected), canonical)))

    return fixtures


@pytest.fixture
def registry() -> HasherRegistry:
    return HasherRegistry.with_builtins()


@pytest.fixture
def empty_registry() -> HasherRegistry:
    return HasherRegistry()
