#!/usr/bin/env python3
"""Report which host features are available"""
import json
import sys
from config import Config
from environment.context import FeatureProbe
from logging_config import setup_structured_logging, get_logger, log_probe_result, log_error


def main():
    """Main application entry point"""
    try:
        config = Config()

        setup_structured_logging(config)
        logger = get_logger(__name__)

        probe = FeatureProbe(config)
        report = probe.report(config.report_extensions)

        for name, result in report.items():
            if name == "extensions":
                for extension, supported in result.items():
                    log_probe_result(logger, "extension", supported, extension=extension)
            else:
                log_probe_result(logger, name, result)

        print(json.dumps(report, indent=2))

    except Exception as e:
        logger = get_logger(__name__)
        log_error(logger, e, {"component": "main", "phase": "report"})
        sys.exit(1)


if __name__ == '__main__':
    main()
