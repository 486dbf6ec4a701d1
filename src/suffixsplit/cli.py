import sys

from suffixsplit.cli_args import parse_arguments
from suffixsplit.common.config import Config
from suffixsplit.common.errors import DomainInvalid, SuffixSplitError
from suffixsplit.common.logging_utils import configure_logging, get_logger
from suffixsplit.common.suffix_list import SuffixList, get_default_suffix_list
from suffixsplit.core.resolver import Resolver
from suffixsplit.reporting.resolution_report import ResolutionReport

logger = get_logger(__name__)


def _format_line(*fields) -> str:
    return "\t".join(f if f is not None else "" for f in fields)


def main(argv=None) -> int:
    # Config object stores all arguments parsed
    config = Config(parse_arguments(argv))
    configure_logging(config.log_level)

    try:
        suffix_list = SuffixList.load(config.list_path) if config.list_path else get_default_suffix_list()
    except SuffixSplitError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    resolver = Resolver(suffix_list, ignore_private=config.ignore_private, strict=config.strict)
    report = ResolutionReport(config.output_file) if config.output_file else None

    rejected = 0
    try:
        for host in config.hosts:
            try:
                result, rule = resolver.resolve_rule(host)
            except DomainInvalid as exc:
                rejected += 1
                print(_format_line(host, f"error: {exc}"))
                if report is not None:
                    report.add(host, exc)
                continue

            print(_format_line(host, result.trd, result.sld, result.tld, rule.text))
            if report is not None:
                report.add(host, result, rule)

        if report is not None:
            report.generate()
            logger.info("Wrote report to %s", config.output_file)
    finally:
        if report is not None:
            report.close()

    return 1 if rejected else 0


if __name__ == "__main__":
    sys.exit(main())
