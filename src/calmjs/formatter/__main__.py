# -*- coding: utf-8 -*-
import sys

from calmjs.formatter.audit import main

if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
