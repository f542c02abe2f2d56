#!/usr/bin/env python3
"""Basic usage example"""

from log_facade import FilterResult, HandlerBuilder, LogLevel, LoggerBuilder, get_marker
from log_facade.filters import MarkerFilter, RateLimitFilter
from log_facade.handlers import AndroidLogHandler

def main():
    audit = get_marker("AUDIT")

    # Audit-marked calls always reach the native log, the rest is rate limited
    android = (HandlerBuilder(AndroidLogHandler)
        .with_level(LogLevel.DEBUG)
        .with_filter(MarkerFilter(audit, when_matched=FilterResult.ACCEPT,
                                  when_differ=FilterResult.NEUTRAL))
        .with_filter(RateLimitFilter(max_events=5, interval=1.0))
        .with_location()
        .build())

    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_name("example.app.Main")
        .with_console(LogLevel.WARN, colored=True)
        .add_handler(android)
        .build())

    # Log messages
    logger.trace("This is trace")
    logger.debug("This is debug")
    logger.info("Application started, pid %d", 4242)
    logger.info("user signed in", marker=audit)
    logger.warn(lambda: "This is warning built on demand")
    logger.error("This is error", throwable=RuntimeError("disk full"))
    logger.critical("This is critical")

    # Flush and shutdown
    logger.flush()
    logger.shutdown()

if __name__ == "__main__":
    main()
