import sys

import fhash.cli.driver as driver


def main(argv=None) -> int:
    return driver.main(argv)


if __name__ == "__main__":
    sys.exit(main())
