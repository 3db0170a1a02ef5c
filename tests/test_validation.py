from kanary_operator.models.spec import KanaryDeploymentSpec
from kanary_operator.utils.validation import validate_duration, validate_spec


def test_default_spec_is_valid():
    assert validate_spec(KanaryDeploymentSpec()) == []


def test_complete_spec_is_valid():
    spec = KanaryDeploymentSpec.from_dict(
        {
            "serviceName": "web",
            "deploymentName": "web",
            "scale": {"hpa": {"minReplicas": 1, "maxReplicas": 4}},
            "traffic": {"source": "mirror", "mirror": {"activate": True}},
            "validations": {
                "initialDelay": "1m",
                "validationPeriod": "1h30m",
                "maxIntervalPeriod": "20s",
                "items": [
                    {"promQL": {"prometheusService": "prometheus:9090", "query": "up"}},
                    {"manual": {"statusAfterDeadline": "invalid"}},
                ],
            },
        }
    )
    assert validate_spec(spec) == []


def test_unknown_traffic_source():
    spec = KanaryDeploymentSpec.from_dict({"traffic": {"source": "everything"}})
    errors = validate_spec(spec)
    assert len(errors) == 1
    assert "spec.traffic.source" in errors[0]


def test_mirror_source_requires_mirror_settings():
    spec = KanaryDeploymentSpec.from_dict({"traffic": {"source": "mirror"}})
    assert validate_spec(spec) == [
        "spec.traffic.mirror is required when spec.traffic.source is 'mirror'"
    ]


def test_hpa_bounds():
    spec = KanaryDeploymentSpec.from_dict({"scale": {"hpa": {"minReplicas": 5, "maxReplicas": 2}}})
    errors = validate_spec(spec)
    assert any("maxReplicas" in e for e in errors)


def test_negative_static_replicas():
    spec = KanaryDeploymentSpec.from_dict({"scale": {"static": {"replicas": -1}}})
    assert any("spec.scale.static.replicas" in e for e in validate_spec(spec))


def test_validation_item_requires_mechanism():
    spec = KanaryDeploymentSpec.from_dict({"validations": {"items": [{}]}})
    assert validate_spec(spec) == [
        "spec.validations.items[0] must define one of labelWatch, promQL or manual"
    ]


def test_promql_requires_service_and_query():
    spec = KanaryDeploymentSpec.from_dict({"validations": {"items": [{"promQL": {}}]}})
    errors = validate_spec(spec)
    assert "spec.validations.items[0].promQL.prometheusService is required" in errors
    assert "spec.validations.items[0].promQL.query is required" in errors


def test_manual_status_values():
    spec = KanaryDeploymentSpec.from_dict(
        {"validations": {"items": [{"manual": {"status": "maybe", "statusAfterDeadline": "later"}}]}}
    )
    assert len(validate_spec(spec)) == 2


def test_invalid_duration():
    spec = KanaryDeploymentSpec.from_dict({"validations": {"validationPeriod": "ten minutes"}})
    assert validate_spec(spec) == [
        "spec.validations.validationPeriod: Invalid duration format: 'ten minutes'"
    ]


def test_validate_duration():
    assert validate_duration("1h30m") is None
    assert validate_duration("250ms") is None
    assert validate_duration("") is not None
    assert validate_duration("15") is not None
