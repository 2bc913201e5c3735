"""Discount rule model and the default company discount table."""
from __future__ import annotations

from datetime import datetime
from typing import Any, List, Tuple

from pydantic import BaseModel, ConfigDict, Field


def _utc_timestamp() -> str:
    return datetime.utcnow().isoformat()


class DiscountRule(BaseModel):
    """Discount applied to a category, optionally restricted to one brand."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    category: str
    brand: str = ""
    discount_percentage: float = Field(alias="discountPercentage", ge=0, le=1)
    is_active: bool = Field(default=True, alias="isActive")
    created_by: str = Field(default="system", alias="createdBy")
    created_at: str = Field(default_factory=_utc_timestamp, alias="createdAt")
    last_modified: str = Field(default_factory=_utc_timestamp, alias="lastModified")

    def matches(self, category: str, brand: str) -> bool:
        normalised_category = category.upper().strip()
        normalised_brand = brand.upper().strip()
        if not self.is_active or self.category.upper() != normalised_category:
            return False
        return self.brand == "" or self.brand.upper() == normalised_brand


# (id, category, brand, fraction)
_DEFAULT_RULE_ROWS: Tuple[Tuple[str, str, str, float], ...] = (
    ("p4x4_bf", "P4X4", "BF GOODRICH", 0.2277),
    ("p4x4_giti", "P4X4", "GITI", 0.0933),
    ("p4x4_michelin", "P4X4", "MICHELIN", 0.1829),
    ("tbr_aeolus", "TBR", "AEOLUS", 0.0004),
    ("tbr_bf", "TBR", "BF GOODRICH", 0.1761),
    ("tbr_michelin", "TBR", "MICHELIN", 0.1126),
    ("tbr_giti", "TBR", "GITI", 0.0076),
    ("tbr_advance", "TBR", "ADVANCE", 0.0013),
    ("tbr_tigar", "TBR", "TIGAR", 0.1429),
    ("tbr_bridgestone", "TBR", "BRIDGESTONE", 0.302),
    ("agr_petlas", "AGR", "PETLAS", 0.0308),
    ("agr_michelin", "AGR", "MICHELIN", 0.0755),
    ("agr_bkt", "AGR", "BKT", 0.1000),
    ("spr_bpw", "SPR", "BPW", 0.0360),
    ("spr_wabco", "SPR", "WABCO", 0.0416),
    ("spr_3m", "SPR", "3M", 0.0263),
    ("spr_textar", "SPR", "TEXTAR", 0.0394),
    ("spr_contitech", "SPR", "CONTITECH", 0.0426),
    ("spr_don", "SPR", "DON", 0.0409),
    ("spr_donaldson", "SPR", "DONALDSON", 0.0300),
    ("spr_varta", "SPR", "VARTA", 0.0429),
    ("spr_vbg", "SPR", "VBG", 0.0235),
    ("spr_jost", "SPR", "JOST", 0.0608),
    ("spr_mann", "SPR", "MANN FILTER", 0.0356),
    ("spr_nisshinbo", "SPR", "NISSHINBO", 0.0625),
    ("spr_hella", "SPR", "HELLA", 0.0381),
    ("spr_sach", "SPR", "SACH", 0.0497),
    ("spr_waikar", "SPR", "WAIKAR", 0.0302),
    ("spr_myers", "SPR", "MYERS", 0.0300),
    ("spr_tank", "SPR", "TANK FITTINGS", 0.0391),
    ("spr_tyre_acc", "SPR", "Tyre accessories and Spares", 0.0227),
    ("spr_corghi", "SPR", "CORGHI", 0.0189),
    ("spr_fronius", "SPR", "FRONIUS", 0.0500),
    ("spr_kahveci", "SPR", "KAHVECI OTOMOTIV", 0.0481),
    ("spr_zeca", "SPR", "ZECA", 0.0037),
    ("spr_fini", "SPR", "FINI", 0.0240),
    ("spr_jmc", "SPR", "JMC", 0.0500),
    ("ind_advance", "IND", "ADVANCE", 0.0169),
    ("ind_camso", "IND", "CAMSO", 0.0179),
    ("ind_michelin", "IND", "MICHELIN", 0.0476),
    ("ind_petlas", "IND", "PETLAS", 0.2000),
    ("otr_advance", "OTR", "ADVANCE", 0.0030),
    ("otr_michelin", "OTR", "MICHELIN", 0.0329),
    ("otr_techking", "OTR", "TECHKING", 0.0037),
    ("services", "Services", "", 0.0021),
    ("trl_ser", "TRL-SER", "", 0.002),
    ("hde_ser_heli", "HDE Services", "HELI", 0.0048),
    ("hde_ser_jmc", "HDE Services", "JMC", 0.0072),
    ("hde_ser_gb", "HDE Services", "GB POWER", 0.0026),
    ("hde_ser_gaither", "HDE Services", "GAITHER TOOL", 0.0254),
    ("hde_gb", "HDE", "GB POWER", 0.0056),
    ("hde_heli", "HDE", "HELI", 0.0006),
    ("gep_corghi", "GEP", "Corghi", 0.0098),
    ("gep_heli", "GEP", "HELI", 0.0046),
    ("gep_fini", "GEP", "FINI", 0.0090),
    ("gep_combijet", "GEP", "COMBIJET", 0.0500),
    ("gep_gb", "GEP", "GB POWER", 0.0104),
)


def default_discount_rules() -> List[DiscountRule]:
    """Return a fresh copy of the built-in discount rules."""

    return [
        DiscountRule(id=rule_id, category=category, brand=brand, discount_percentage=fraction)
        for rule_id, category, brand, fraction in _DEFAULT_RULE_ROWS
    ]


def rules_to_payload(rules: List[DiscountRule]) -> List[dict[str, Any]]:
    return [rule.model_dump(by_alias=True) for rule in rules]
