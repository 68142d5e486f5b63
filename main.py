import sys

from build_list import build_reject_domainset
from sources import BuildConfig


def main(argv=None):
    """Build the reject domainset; exit status 1 if the debug domain showed up."""
    argv = sys.argv[1:] if argv is None else argv
    overrides = {"output_dir": argv[0]} if argv else {}

    result = build_reject_domainset(BuildConfig.from_env(**overrides))
    if result.should_stop:
        print("Debug domain found, stopping.")
        return 1

    print(f"Wrote {len(result.domains)} domains, {len(result.stats)} stat lines.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
