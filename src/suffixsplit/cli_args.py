import argparse

from suffixsplit.common.defaults import DEFAULT_LOG_LEVEL, LIST_PATH_ENV


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(prog="suffixsplit",
                                     description="""Split hostnames into subdomain, registrable domain and public suffix using the Public Suffix List.""",
                                     formatter_class=lambda prog: argparse.HelpFormatter(prog, max_help_position=80))

    parser.add_argument('hosts', metavar='HOST', nargs='*', type=str,
                        help='Hostnames to resolve.')

    parser.add_argument('-i', '--input', metavar='<file>', dest="input_files",
                        nargs='+', type=str, default=[],
                        help='Files with one hostname per line (glob patterns allowed).')

    parser.add_argument('--list', metavar='<file>', dest="list_path",
                        type=str, required=False, default=None,
                        help='Public Suffix List file to use instead of the bundled one '
                             '(default=${} or the bundled list)'.format(LIST_PATH_ENV))

    parser.add_argument('--ignore-private', action='store_true', dest="ignore_private",
                        help='Only match ICANN rules, skipping the private domains section')

    parser.add_argument('--strict', action='store_true', dest="strict",
                        help='Reject hostnames whose TLD is not covered by any rule')

    parser.add_argument('-o', '--output', metavar='<xlsx>', dest="output_file",
                        type=str, required=False, default=None,
                        help='Write an Excel report of the results to this file.')

    parser.add_argument('--log-level', metavar='LEVEL', dest="log_level",
                        type=str, required=False, default=DEFAULT_LOG_LEVEL,
                        help='Logging level. (default={})'.format(DEFAULT_LOG_LEVEL))

    args = parser.parse_args(argv)
    if not args.hosts and not args.input_files:
        parser.error("no hostnames given, pass HOST arguments or --input files")
    return args
