"""Shared fixtures for core unit tests"""

import pytest

from sitecontent.core.parse import make_parser


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** and ~~struck~~ text, see https://example.com.

## Hello World

| a | b |
|---|---|
| 1 | 2 |

```python:hello.py
print("hello")
```

## Hello World
"""


@pytest.fixture(name="parser")
def parser_fixture():
    return make_parser()


@pytest.fixture(name="sample_tokens")
def sample_tokens_fixture(parser):
    return parser.parse(SAMPLE_MD)
