import logging

from graphlearn.domain.enums.notice_kind import NoticeKind
from graphlearn.services.notifications.log_sink import LoggingNotificationSink, Notice


def test_keeps_recent_notices_and_logs(caplog):
    sink = LoggingNotificationSink(maxlen=2)
    with caplog.at_level(logging.INFO, logger="graphlearn.services.notifications.log_sink"):
        sink.notify(NoticeKind.success, "saved")
        sink.notify("warning", "careful")
        sink.notify(NoticeKind.error, "broken")

    assert sink.notices == [Notice(NoticeKind.warning, "careful"), Notice(NoticeKind.error, "broken")]
    assert sink.last().message == "broken"
    levels = [r.levelno for r in caplog.records]
    assert levels == [logging.INFO, logging.WARNING, logging.ERROR]

    sink.clear()
    assert sink.last() is None
