"""Manual entry adapter for JSON calculation requests.

Accepts the camelCase field names used by the web calculator
(``annualTaxableIncome``, ``assets[].salePrice``) as well as snake_case.
"""

import json
import logging
from collections import Counter
from decimal import Decimal
from pathlib import Path

from pydantic import ValidationError

from cgtcalc.exceptions import DataValidationError, InputFileError
from cgtcalc.models.inputs import CGTInputs

logger = logging.getLogger(__name__)

_MONEY_FIELDS = ("purchase_price", "additional_costs", "sale_price")


class ManualAdapter:
    """Builds CGTInputs from JSON files or already-decoded dicts."""

    def parse(self, file_path: Path) -> CGTInputs:
        """Read a JSON request file and return validated inputs."""
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            text = file_path.read_text(encoding="utf-8")
        except (UnicodeDecodeError, OSError) as exc:
            raise InputFileError(file_path.name, f"cannot read file ({exc})") from exc

        try:
            raw = json.loads(text, parse_float=Decimal)
        except json.JSONDecodeError as exc:
            raise InputFileError(file_path.name, f"invalid JSON ({exc.msg}, line {exc.lineno})") from exc

        logger.info("Loaded calculation request from %s", file_path)
        return self.from_dict(raw, source=file_path.name)

    def from_dict(self, raw: object, source: str = "input") -> CGTInputs:
        if not isinstance(raw, dict):
            raise InputFileError(source, "expected a JSON object at the top level")

        data = dict(raw)
        assets = data.get("assets")
        if isinstance(assets, list):
            data["assets"] = [self._with_default_id(a, i) for i, a in enumerate(assets, start=1)]

        try:
            return CGTInputs.model_validate(data)
        except ValidationError as exc:
            first = exc.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or "input"
            raise DataValidationError(field, first["msg"]) from exc

    def validate(self, inputs: CGTInputs) -> list[str]:
        """Return non-fatal warnings about the inputs."""
        warnings: list[str] = []

        if not inputs.assets:
            warnings.append("No assets supplied; all gains will be zero")

        if inputs.annual_taxable_income < 0:
            warnings.append("Annual taxable income is negative and will be treated as 0")

        if inputs.has_unapplied_losses and inputs.unapplied_losses_amount < 0:
            warnings.append("Unapplied losses amount is negative and will be treated as 0")
        if not inputs.has_unapplied_losses and inputs.unapplied_losses_amount > 0:
            warnings.append(
                f"Unapplied losses of {inputs.unapplied_losses_amount} ignored "
                "because hasUnappliedLosses is false"
            )

        for asset in inputs.assets:
            for name in _MONEY_FIELDS:
                if getattr(asset, name) < Decimal("0"):
                    effect = "proceeds treated as 0" if name == "sale_price" else "cost base floored at 0"
                    warnings.append(f"Asset {asset.id}: {name} is negative ({effect})")

        duplicates = [asset_id for asset_id, n in Counter(a.id for a in inputs.assets).items() if n > 1]
        for asset_id in duplicates:
            warnings.append(f"Duplicate asset id: {asset_id}")

        if inputs.assets_purchased_before_1985 and inputs.assets:
            warnings.append("All assets treated as acquired before 20 September 1985 (CGT exempt)")

        if warnings:
            logger.debug("Input validation produced %d warning(s)", len(warnings))
        return warnings

    @staticmethod
    def _with_default_id(asset: object, position: int) -> object:
        if isinstance(asset, dict) and "id" not in asset:
            return {**asset, "id": f"asset-{position}"}
        return asset
