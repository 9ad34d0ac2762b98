from lazycons.lazylist import from_iterable
import argparse
import re
import sys


def regex(pattern):
    try:
        return re.compile(pattern)
    except re.error as err:
        raise argparse.ArgumentTypeError(f'invalid regex {pattern!r}: {err}')


lazycons = argparse.ArgumentParser(
    description='Filter lines of a file, reading only as much of it as needed',
    prog='python -m lazycons'
)

lazycons.add_argument(
    'input', nargs='?',
    help='the file to read [default: standard input]'
)

lazycons.add_argument(
    '--drop', metavar='N', type=int, default=0,
    help='skip the first N matching lines'
)

lazycons.add_argument(
    '--take', metavar='N', type=int, default=None,
    help='stop after N lines have been printed'
)

lazycons.add_argument(
    '--grep', metavar='REGEX', type=regex, default=None,
    help='only keep lines matching REGEX'
)

lazycons.add_argument(
    '-n', '--number', action='store_true',
    help='prefix each line with its line number in the input'
)


def select(lines, args):
    lines = from_iterable(
        (num, line.removesuffix('\n')) for num, line in enumerate(lines, 1)
    )
    if args.grep is not None:
        lines = lines.filter(lambda item: args.grep.search(item[1]))
    lines = lines.drop(args.drop)
    if args.take is not None:
        lines = lines.take(args.take)
    return lines


def run(file, args):
    for num, line in select(file, args):
        if args.number:
            print(f'{num:6}\t{line}')
        else:
            print(line)


def main(argv=None):
    args = lazycons.parse_args(argv)
    if args.take is not None and args.take < 0:
        lazycons.error('--take must not be negative')
    if args.drop < 0:
        lazycons.error('--drop must not be negative')

    try:
        if args.input is None:
            run(sys.stdin, args)
        else:
            with open(args.input) as file:
                run(file, args)
    except OSError as err:
        print(f'{lazycons.prog}: {err}', file=sys.stderr)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
