#!/usr/bin/env python3
"""Basic usage example"""

from glog_module import ConfigBuilder, LogLevel, configure, get_log


def main():
    # Route errors to their own file, everything else to the console
    config = (ConfigBuilder()
        .with_level(LogLevel.DEBUG)
        .with_console()
        .with_file("logs/errors.log", errors_only=True)
        .build())
    configure(config)

    log = get_log()  # named "basic_usage"

    log.debug("This is debug")
    log.info("Application started")
    log.warn("This is warning")
    log.error("This is error")
    log.criticalf("Disk %s at %d%%", "/var", 97)

    log.silence()
    log.info("Not printed")


if __name__ == "__main__":
    main()
