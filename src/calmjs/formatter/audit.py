# -*- coding: utf-8 -*-
"""
Check that a registry holds a builder for exactly the known node kinds.

Running the package reports the coverage for each grammar of the
default builder tables::

    $ python -m calmjs.formatter
"""

import logging
import sys
from argparse import ArgumentParser
from collections import namedtuple

from calmjs.formatter.exceptions import RegistryMismatch
from calmjs.formatter.kinds import ALL_KINDS
from calmjs.formatter.kinds import GRAMMARS

logger = logging.getLogger(__name__)

AuditReport = namedtuple('AuditReport', ['missing', 'orphaned'])


def audit(registry, kinds=ALL_KINDS):
    """
    Compare the tags of the registry against the kinds.

    Returns an AuditReport of the kinds without a builder (missing) and
    the tags registered for kinds that are unknown (orphaned), both as
    sorted tuples.
    """

    kinds = frozenset(kinds)
    tags = registry.tags()
    return AuditReport(
        tuple(sorted(kinds - tags)),
        tuple(sorted(tags - kinds)),
    )


def verify(registry, kinds=ALL_KINDS):
    """
    Raise RegistryMismatch unless the registry covers exactly the kinds.
    """

    report = audit(registry, kinds)
    if report.missing or report.orphaned:
        logger.debug(
            'registry audit failed: %d missing, %d orphaned',
            len(report.missing), len(report.orphaned),
        )
        raise RegistryMismatch(report.missing, report.orphaned)
    return registry


def main(argv=None, registry=None, stream=None):
    parser = ArgumentParser(
        prog='python -m calmjs.formatter',
        description='report the builder coverage of the node kinds',
    )
    parser.add_argument(
        '--grammar', action='append', default=[],
        choices=[name for name, tags in GRAMMARS],
        help='only report on the named grammar; may be repeated',
    )
    args = parser.parse_args(argv)
    stream = sys.stdout if stream is None else stream

    if registry is None:
        from calmjs.formatter.builders import create_registry
        registry = create_registry(audit=False)

    selected = [
        (name, tags) for name, tags in GRAMMARS
        if not args.grammar or name in args.grammar
    ]
    failed = False
    for name, tags in selected:
        report = audit(registry, tags)
        covered = len(tags) - len(report.missing)
        stream.write('%s: %d/%d\n' % (name, covered, len(tags)))
        for tag in report.missing:
            stream.write('  missing: %s\n' % tag)
        failed = failed or bool(report.missing)

    if not args.grammar:
        report = audit(registry)
        for tag in report.orphaned:
            stream.write('orphaned: %s\n' % tag)
        failed = failed or bool(report.orphaned)

    return 1 if failed else 0
