"""
assuo command line

    assuo                      run ./assuo.toml, or a document piped on stdin
    assuo FILE / --file FILE   run a document from disk
    assuo --url URL            run a document fetched from URL
    assuo --init [NAME]        print a template document, or write it to NAME

The patched bytes go to stdout unless -o is given.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from assuo.config import AssuoConfig
from assuo.core.errors import AssuoError
from assuo.runtime.patch_workflow import PatchWorkflow

logger = logging.getLogger(__name__)

TEMPLATE = '''[source]
text = "Hello!"

[[patch]]
do = "insert"
way = "post"
spot = 4
source = { text = ", World" }
'''


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='assuo', description='assuo patch maker')
    parser.add_argument('document', nargs='?', help='Path to an assuo patch file')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('-f', '--file', help='Load an assuo patch file from disk')
    group.add_argument('-u', '--url', help='Load an assuo patch file from the internet')
    group.add_argument('-i', '--init', nargs='?', const='', metavar='NAME',
                       help='Make a new blank assuo patch file (printed if NAME is omitted)')
    parser.add_argument('-o', '--output', help='Write the patched bytes here instead of stdout')
    parser.add_argument('--timeout', type=float, help='Seconds to wait for URL fetches (default: no limit)')
    parser.add_argument('--max-depth', type=int, default=16, help='Maximum nesting of assuo documents (default: 16)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')
    return parser


def init(file_name: Optional[str]):
    """Print the template document, or write it to a new file"""
    if not file_name:
        sys.stdout.write(TEMPLATE)
        return
    with open(file_name, 'x', encoding='utf-8') as f:
        f.write(TEMPLATE)


def run(args: argparse.Namespace, config: AssuoConfig) -> bytes:
    """Load the requested document and apply it"""
    workflow = PatchWorkflow(config=config)

    if args.url:
        return workflow.run_url(args.url)

    path = args.file or args.document
    if path:
        return workflow.run_file(path)

    default = Path(config.default_document)
    if default.is_file():
        logger.info(f"Using {default}")
        return workflow.run_file(default)

    logger.info("Reading assuo document from stdin")
    return workflow.run(workflow.importer.load_bytes(sys.stdin.buffer.read()))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr
    )

    if args.init is not None:
        if args.document:
            parser.error("--init takes the file name as its own argument")
        try:
            init(args.init)
        except OSError as e:
            print(f"error: couldn't write {args.init}: {e}", file=sys.stderr)
            return 1
        return 0

    if args.document and (args.file or args.url):
        parser.error("give the document either positionally or with --file/--url, not both")

    try:
        config = AssuoConfig(timeout=args.timeout, max_depth=args.max_depth)
    except ValueError as e:
        parser.error(str(e))

    try:
        patched = run(args, config)
    except AssuoError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.output:
        try:
            Path(args.output).write_bytes(patched)
        except OSError as e:
            print(f"error: couldn't write {args.output}: {e}", file=sys.stderr)
            return 1
    else:
        sys.stdout.buffer.write(patched)
        sys.stdout.buffer.flush()
    return 0


if __name__ == '__main__':
    sys.exit(main())
