import argparse
import os
import sys
from typing import List, Optional

import yaml

from memoizer_demo.report import write_report
from memoizer_demo.scenarios import run_all
from memoizer_demo.settings import DemoSettings


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='demonstrate single slot, keyed and generic memoizers')
    parser.add_argument('--config', dest="config",
                        help='settings file to run the demonstration with')
    parser.add_argument('--create-config', dest="create_config", metavar="FILE",
                        help='write the default settings to FILE and exit')
    parser.add_argument('--verify', dest="verify", metavar="FILE",
                        help='verify an existing settings file and exit')
    parser.add_argument('--xml-report', dest="xml_report", metavar="FILE",
                        help='write what each scenario computed to FILE as XML')

    args = parser.parse_args(argv)

    if args.create_config:
        DemoSettings.defaults().write_as_yaml(args.create_config)
        print("memoizer demo settings are written to %s" %
              (os.path.join(os.getcwd(), args.create_config)))
        return 0

    if args.verify:
        settings = load(args.verify)
        if settings is None:
            return 1
        print("No obvious errors were found.")
        return 0

    if args.config:
        settings = load(args.config)
        if settings is None:
            return 1
    else:
        settings = DemoSettings.defaults()

    logs = run_all(settings)
    if args.xml_report:
        write_report(logs, args.xml_report)
    return 0


# None when the file is missing or has errors. errors are printed
def load(path: str) -> Optional[DemoSettings]:
    if not os.path.isfile(path):
        print("%s does not exist." % path)
        return None
    try:
        settings = DemoSettings.from_yaml(path)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        print("%s is not a valid YAML file: %s" % (path, e))
        return None
    if settings.error_counter.error_count > 0:
        settings.error_counter.print_errors()
        return None
    return settings


if __name__ == '__main__':
    sys.exit(main())
