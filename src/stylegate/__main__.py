# SPDX-License-Identifier: MIT
"""Package entry point — run stylegate via `python -m stylegate`.

Using `python -m stylegate` instead of `python -m stylegate.validate` avoids
a RuntimeWarning caused by __init__.py eagerly importing stylegate.validate
before the -m mechanism executes it as __main__.
"""

from stylegate.validate import main

if __name__ == "__main__":
    raise SystemExit(main())
