from events.services.promo_code_service import PromoCodeService, normalize_code

__all__ = ["PromoCodeService", "normalize_code"]
