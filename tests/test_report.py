from kanary_operator.utils.status import (
    build_report,
    get_report_status,
    get_scale,
    get_traffic,
    get_validation,
    update_status_with_report,
)
from tests.fakes import build_kd, condition


def test_report_status_running_without_conditions():
    kd = build_kd()
    assert get_report_status(kd.status) == "Running"


def test_report_status_failed():
    kd = build_kd(status={"conditions": [condition("Failed", "True")]})
    assert get_report_status(kd.status) == "Failed"


def test_report_status_succeeded_wins_over_failed():
    kd = build_kd(
        status={"conditions": [condition("Failed", "True"), condition("Succeeded", "True")]}
    )
    assert get_report_status(kd.status) == "Succeeded"


def test_report_status_ignores_false_succeeded():
    kd = build_kd(
        status={"conditions": [condition("Succeeded", "False"), condition("Failed", "True")]}
    )
    assert get_report_status(kd.status) == "Failed"


def test_validation_unknown_without_items():
    kd = build_kd(spec={"validations": {"items": []}})
    assert get_validation(kd) == "unknown"


def test_validation_labels_for_one_item():
    kd = build_kd(
        spec={
            "validations": {
                "items": [
                    {
                        "labelWatch": {"podInvalidationLabels": {"matchLabels": {"bad": "yes"}}},
                        "promQL": {"prometheusService": "prometheus:9090", "query": "up"},
                    }
                ]
            }
        }
    )
    assert get_validation(kd) == "labelWatch,promQL"


def test_validation_labels_keep_mechanism_order_across_items():
    kd = build_kd(
        spec={
            "validations": {
                "items": [
                    {"manual": {"statusAfterDeadline": "valid"}},
                    {
                        "manual": {},
                        "promQL": {"prometheusService": "prometheus:9090", "query": "up"},
                        "labelWatch": {},
                    },
                ]
            }
        }
    )
    assert get_validation(kd) == "manual,labelWatch,promQL,manual"


def test_scale_static_without_hpa():
    kd = build_kd(spec={"scale": {"static": {"replicas": 2}}})
    assert get_scale(kd) == "static"


def test_scale_hpa():
    kd = build_kd(spec={"scale": {"hpa": {"minReplicas": 1, "maxReplicas": 5}}})
    assert get_scale(kd) == "hpa"


def test_traffic_is_copied_verbatim():
    kd = build_kd(spec={"traffic": {"source": "kanary-service"}})
    assert get_traffic(kd) == "kanary-service"


def test_build_report():
    kd = build_kd(
        spec={
            "scale": {"hpa": {"maxReplicas": 3}},
            "traffic": {"source": "both"},
            "validations": {"items": [{"manual": {}}]},
        },
        status={"conditions": [condition("Succeeded", "True")]},
    )
    report = build_report(kd, kd.status)
    assert report.status == "Succeeded"
    assert report.validation == "manual"
    assert report.scale == "hpa"
    assert report.traffic == "both"


def test_update_status_with_report_keeps_current_status():
    kd = build_kd(
        status={
            "report": {
                "status": "Running",
                "validation": "unknown",
                "scale": "static",
                "traffic": "none",
            }
        }
    )
    assert update_status_with_report(kd, kd.status) is kd.status


def test_update_status_with_report_replaces_stale_report():
    kd = build_kd(status={"report": {"status": "Failed"}})
    updated = update_status_with_report(kd, kd.status)

    assert updated is not kd.status
    assert updated.report.status == "Running"
    assert kd.status.report.status == "Failed"


def test_report_follows_given_status():
    kd = build_kd()
    new_status = kd.status.model_copy(deep=True)
    new_status.conditions = build_kd(
        status={"conditions": [condition("Failed", "True")]}
    ).status.conditions

    assert update_status_with_report(kd, new_status).report.status == "Failed"
