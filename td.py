#!/usr/bin/env python3
"""Thin loader delegating CLI logic to the interface layer."""

import sys

from interface import td_app as _td_app

if __name__ != "__main__":
    # When imported, expose the full interface implementation directly.
    sys.modules[__name__] = _td_app
else:
    sys.exit(_td_app.main())
