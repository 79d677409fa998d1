from lambda_sampler.core.logging_config import _plain_text_renderer


def test_plain_text_renderer_orders_fields_and_drops_none():
    line = _plain_text_renderer(
        None,
        "warning",
        {
            "timestamp": "2026-01-01T00:00:00Z",
            "level": "warning",
            "logger": "lambda_sampler.sampler.invocation_sampler",
            "event": "sample_failed",
            "function_name": "echoFn",
            "category": "transport",
            "qualifier": None,
        },
    )

    assert line == (
        "2026-01-01T00:00:00Z [WARNING] lambda_sampler.sampler.invocation_sampler "
        "sample_failed function_name=echoFn category=transport"
    )


def test_plain_text_renderer_appends_exception():
    line = _plain_text_renderer(
        None,
        "debug",
        {"level": "debug", "event": "sample_failure_traceback", "exception": "Traceback ..."},
    )

    assert line == "[DEBUG] sample_failure_traceback\nTraceback ..."
