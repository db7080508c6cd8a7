from datetime import datetime, timedelta, timezone

from roster.time_utils import assume_utc, coerce_utc, to_epoch_millis


def test_coerce_utc() -> None:
    assert coerce_utc(None) is None
    naive = datetime(2020, 1, 1, 12, 0)
    assert coerce_utc(naive) == datetime(2020, 1, 1, 12, 0, tzinfo=timezone.utc)
    shifted = datetime(2020, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=3)))
    assert coerce_utc(shifted).hour == 9


def test_assume_utc_keeps_aware_values() -> None:
    shifted = datetime(1, 1, 1, 0, 30, tzinfo=timezone(timedelta(hours=1)))
    assert assume_utc(shifted) is shifted
    assert assume_utc(datetime(2020, 1, 1)).tzinfo is timezone.utc


def test_to_epoch_millis() -> None:
    assert to_epoch_millis(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 0
    moment = datetime(2012, 12, 12, 12, 12, 12, tzinfo=timezone.utc)
    assert to_epoch_millis(moment) == 1_355_314_332_000
    assert to_epoch_millis(moment.replace(tzinfo=None)) == 1_355_314_332_000
    assert to_epoch_millis(moment + timedelta(microseconds=999)) == 1_355_314_332_000
    assert to_epoch_millis(datetime(1969, 12, 31, 23, 59, 59, 999_500, tzinfo=timezone.utc)) == -1


def test_to_epoch_millis_at_range_edges() -> None:
    plus_one = timezone(timedelta(hours=1))
    assert to_epoch_millis(datetime(1, 1, 1, 0, 30, tzinfo=plus_one)) < 0
    assert to_epoch_millis(datetime.max.replace(tzinfo=timezone.utc)) > 0
