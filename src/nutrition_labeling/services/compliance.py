"""Label compliance checks against 21 CFR 101.9 and the 101.60-101.62 claims."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from nutrition_labeling.domain.compliance import (
    CheckSeverity,
    ComplianceCheck,
    ComplianceReport,
)
from nutrition_labeling.domain.nutrition import NUTRIENT_DISPLAY_NAMES, NUTRIENT_KEYS
from nutrition_labeling.services.rounding import round_half_up

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

# A declared amount this close to its rounded form counts as rounded.
ROUNDING_TOLERANCE = 0.01


@dataclass(frozen=True)
class ClaimRule:
    """A "free" or "low" nutrient content claim and its per-serving ceiling."""

    rule_id: str
    rule_name: str
    terms: tuple[str, ...]
    nutrient_key: str
    max_amount: float
    cfr_reference: str


CLAIM_RULES: tuple[ClaimRule, ...] = (
    ClaimRule(
        "claim-calorie-free",
        "Calorie Free",
        ("calorie free", "free of calories", "no calories", "zero calories"),
        "calories",
        5,
        "21 CFR 101.60(b)(1)",
    ),
    ClaimRule(
        "claim-fat-free",
        "Fat Free",
        ("fat free", "free of fat", "no fat", "zero fat"),
        "total_fat_g",
        0.5,
        "21 CFR 101.62(b)(1)",
    ),
    ClaimRule(
        "claim-saturated-fat-free",
        "Saturated Fat Free",
        ("saturated fat free", "no saturated fat"),
        "saturated_fat_g",
        0.5,
        "21 CFR 101.62(b)(2)",
    ),
    ClaimRule(
        "claim-cholesterol-free",
        "Cholesterol Free",
        ("cholesterol free", "no cholesterol", "zero cholesterol"),
        "cholesterol_mg",
        2,
        "21 CFR 101.62(d)(1)",
    ),
    ClaimRule(
        "claim-sodium-free",
        "Sodium Free",
        ("sodium free", "no sodium", "zero sodium", "salt free"),
        "sodium_mg",
        5,
        "21 CFR 101.61(b)(1)",
    ),
    ClaimRule(
        "claim-sugar-free",
        "Sugar Free",
        ("sugar free", "no sugar", "zero sugar", "sugarless"),
        "total_sugars_g",
        0.5,
        "21 CFR 101.60(c)(1)",
    ),
    ClaimRule(
        "claim-low-calorie",
        "Low Calorie",
        ("low calorie", "few calories", "low in calories"),
        "calories",
        40,
        "21 CFR 101.60(b)(2)",
    ),
    ClaimRule(
        "claim-low-fat",
        "Low Fat",
        ("low fat", "low in fat"),
        "total_fat_g",
        3,
        "21 CFR 101.62(b)(2)",
    ),
    ClaimRule(
        "claim-low-saturated-fat",
        "Low Saturated Fat",
        ("low saturated fat", "low in saturated fat"),
        "saturated_fat_g",
        1,
        "21 CFR 101.62(c)(2)",
    ),
    ClaimRule(
        "claim-low-cholesterol",
        "Low Cholesterol",
        ("low cholesterol", "low in cholesterol"),
        "cholesterol_mg",
        20,
        "21 CFR 101.62(d)(2)",
    ),
    ClaimRule(
        "claim-low-sodium",
        "Low Sodium",
        ("low sodium", "low in sodium"),
        "sodium_mg",
        140,
        "21 CFR 101.61(b)(2)",
    ),
    ClaimRule(
        "claim-very-low-sodium",
        "Very Low Sodium",
        ("very low sodium", "very low in sodium"),
        "sodium_mg",
        35,
        "21 CFR 101.61(b)(3)",
    ),
)


def expected_serving_size_g(grams: float) -> float:
    """
    Serving size in grams:
    < 2 g: nearest 0.1 g
    < 5 g: nearest 0.5 g
    >= 5 g: nearest 1 g
    """
    if grams < 2:
        return round_half_up(grams * 10) / 10
    if grams < 5:
        return round_half_up(grams * 2) / 2
    return round_half_up(grams)


def expected_servings_per_container(servings: float) -> float:
    """
    Servings per container:
    < 2: nearest 0.1
    2-5: nearest 0.5
    > 5: nearest whole serving
    """
    if servings < 2:
        return round_half_up(servings * 10) / 10
    if servings <= 5:
        return round_half_up(servings * 2) / 2
    return round_half_up(servings)


def validate_serving_size(
    serving_size_g: float | None, servings_per_container: float | None = None
) -> list[ComplianceCheck]:
    """Check that serving size and servings per container are declared rounded."""
    checks: list[ComplianceCheck] = []
    if serving_size_g is not None:
        expected = expected_serving_size_g(serving_size_g)
        passed = _is_rounded(serving_size_g, expected)
        if passed:
            message = f"Serving size ({_fmt(serving_size_g)}g) is properly rounded"
        else:
            message = (
                f"Serving size should be {_fmt(expected)}g, "
                f"not {_fmt(serving_size_g)}g"
            )
        checks.append(
            ComplianceCheck(
                rule_id="serving-size-rounding-grams",
                rule_name="Serving Size Gram Rounding",
                passed=passed,
                severity=_severity(passed),
                message=message,
                cfr_reference="21 CFR 101.9(b)(7)",
            )
        )
    if servings_per_container is not None:
        expected = expected_servings_per_container(servings_per_container)
        passed = _is_rounded(servings_per_container, expected)
        if passed:
            message = (
                f"Servings per container ({_fmt(servings_per_container)}) "
                "is properly rounded"
            )
        else:
            message = (
                f"Servings per container should be {_fmt(expected)}, "
                f"not {_fmt(servings_per_container)}"
            )
        checks.append(
            ComplianceCheck(
                rule_id="serving-size-servings-per-container",
                rule_name="Servings Per Container Rounding",
                passed=passed,
                severity=_severity(passed),
                message=message,
                cfr_reference="21 CFR 101.9(b)(8)",
            )
        )
    return checks


def check_mandatory_nutrients(
    nutrition: "Mapping[str, float | None]",
) -> ComplianceCheck:
    """Check that every mandatory panel nutrient has a value."""
    missing = [
        NUTRIENT_DISPLAY_NAMES[key]
        for key in NUTRIENT_KEYS
        if nutrition.get(key) is None
    ]
    if missing:
        message = f"Missing mandatory nutrients: {', '.join(missing)}"
    else:
        message = "All mandatory nutrients are present"
    return ComplianceCheck(
        rule_id="mandatory-nutrients-standard",
        rule_name="Mandatory Nutrient Declaration",
        passed=not missing,
        severity=_severity(not missing),
        message=message,
        cfr_reference="21 CFR 101.9(c)",
    )


def check_claims(
    claims: "Iterable[str]", nutrition: "Mapping[str, float | None]"
) -> list[ComplianceCheck]:
    """Check "free" and "low" claims against per-serving nutrient amounts.

    A claim is matched by any rule whose term appears in it, case-insensitively,
    so "very low sodium" is held to both sodium ceilings. Claims that match no
    rule fail with a warning.
    """
    checks: list[ComplianceCheck] = []
    for claim in claims:
        lowered = claim.lower()
        rules = [
            rule for rule in CLAIM_RULES if any(term in lowered for term in rule.terms)
        ]
        if not rules:
            checks.append(
                ComplianceCheck(
                    rule_id="unknown-claim",
                    rule_name="Unknown Claim",
                    passed=False,
                    severity=CheckSeverity.WARNING,
                    message=f'Claim "{claim}" is not a recognized free or low claim',
                )
            )
            continue
        checks.extend(_check_claim(rule, nutrition) for rule in rules)
    return checks


def validate_label(
    nutrition: "Mapping[str, float | None]",
    *,
    serving_size_g: float | None = None,
    servings_per_container: float | None = None,
    claims: "Iterable[str]" = (),
) -> ComplianceReport:
    """Run serving size, mandatory nutrient and claim checks on one label."""
    checks = [
        *validate_serving_size(serving_size_g, servings_per_container),
        check_mandatory_nutrients(nutrition),
        *check_claims(claims, nutrition),
    ]
    return ComplianceReport(checks=tuple(checks))


def _check_claim(
    rule: ClaimRule, nutrition: "Mapping[str, float | None]"
) -> ComplianceCheck:
    amount = nutrition.get(rule.nutrient_key)
    if amount is None:
        return ComplianceCheck(
            rule_id=rule.rule_id,
            rule_name=rule.rule_name,
            passed=False,
            severity=CheckSeverity.WARNING,
            message=(
                f'Claim "{rule.rule_name}" cannot be checked: no '
                f"{NUTRIENT_DISPLAY_NAMES[rule.nutrient_key]} value"
            ),
            cfr_reference=rule.cfr_reference,
        )
    passed = amount <= rule.max_amount
    if passed:
        message = (
            f'Claim "{rule.rule_name}" is valid: '
            f"{_fmt(amount)} <= {_fmt(rule.max_amount)}"
        )
    else:
        message = (
            f'Claim "{rule.rule_name}" is invalid: '
            f"{_fmt(amount)} exceeds maximum {_fmt(rule.max_amount)}"
        )
    return ComplianceCheck(
        rule_id=rule.rule_id,
        rule_name=rule.rule_name,
        passed=passed,
        severity=_severity(passed),
        message=message,
        cfr_reference=rule.cfr_reference,
    )


def _severity(passed: bool) -> CheckSeverity:
    return CheckSeverity.INFO if passed else CheckSeverity.ERROR


def _is_rounded(value: float, expected: float) -> bool:
    return abs(value - expected) < ROUNDING_TOLERANCE


def _fmt(value: float) -> str:
    return f"{value:g}"
