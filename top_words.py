import sys

from logwords import get_logger, count_words, select_top_k, top_k_words
from logwords.config import load_config
from logwords.sources import read_all_lines

WIDTH = 50

DEMO_LINES = [
    "Error: Disk full",
    "Warning: Memory low",
    "error: network down",
    "Error: Disk full",
]
DEMO_K = 2

USAGE = "Usage: python top_words.py [--config config.ini] [-k N] [--html] [file ...]\n"


def _rule():
    return "=" * (WIDTH + 15)


def _row(label, value):
    print("  {:<{}}  {}".format(str(label), WIDTH, value))


def _usage_and_exit():
    sys.stderr.write(USAGE)
    sys.exit(2)


def _parse_args(args):
    options = {'config': None, 'k': None, 'html': False, 'files': []}
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--config":
            options['config'] = args[i + 1] if i + 1 < len(args) else "config.ini"
            i += 2
        elif arg == "-k":
            if i + 1 >= len(args):
                _usage_and_exit()
            try:
                options['k'] = int(args[i + 1])
            except ValueError:
                _usage_and_exit()
            i += 2
        elif arg == "--html":
            options['html'] = True
            i += 1
        elif arg in ("-h", "--help"):
            _usage_and_exit()
        else:
            options['files'].append(arg)
            i += 1
    return options


def run_demo():
    print(top_k_words(DEMO_LINES, DEMO_K))


def print_report(results, paths, token_count, distinct_count):
    print("\n" + _rule())
    print("  Top {} Words ({} file{})".format(len(results), len(paths), "" if len(paths) == 1 else "s"))
    print(_rule())
    _row("Tokens", token_count)
    _row("Distinct words", distinct_count)
    print("-" * (WIDTH + 15))
    for rank, (word, count) in enumerate(results, 1):
        print("  {:>3}. {:<{}} {}".format(rank, str(word), WIDTH - 4, count))
    print(_rule() + "\n")


def main(argv):
    options = _parse_args(argv[1:])
    if not options['files']:
        if options['config'] or options['k'] is not None or options['html']:
            _usage_and_exit()
        run_demo()
        return 0

    config = load_config(options['config'])
    logger = get_logger("TOP_WORDS", log_dir=config.log_dir, level=config.level)
    for warning in config.warnings:
        logger.warning(warning)

    k = options['k'] if options['k'] is not None else config.top_k
    html = options['html'] or config.html
    paths = options['files']

    try:
        lines = read_all_lines(paths, html=html)
    except FileNotFoundError as e:
        missing = e.filename if getattr(e, "filename", None) else "unknown file"
        logger.error(f"File not found: {missing}")
        sys.stderr.write(f"Error: file not found: {missing}\n")
        return 1
    except PermissionError as e:
        denied = e.filename if getattr(e, "filename", None) else "unknown file"
        logger.error(f"Permission denied: {denied}")
        sys.stderr.write(f"Error: permission denied: {denied}\n")
        return 1
    except OSError as e:
        logger.error(str(e))
        sys.stderr.write(f"Error: {e}\n")
        return 1

    freqs = count_words(lines)
    token_count = sum(freqs.values())
    logger.info(
        f"Read {len(lines)} lines from {len(paths)} files, "
        f"found {token_count} tokens and {len(freqs)} distinct words.")
    results = select_top_k(freqs, k)
    print_report(results, paths, token_count, len(freqs))
    return 0


def cli():
    raise SystemExit(main(sys.argv))


if __name__ == "__main__":
    cli()
