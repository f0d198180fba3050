"""
Tests for Pydantic models.
"""
import pytest
from pydantic import ValidationError

from servigo.models.details import ProviderDetails, Review, ServiceSummary
from servigo.models.enrichment import EnrichedListing
from servigo.models.filters import ALL, FilterCriteria, Partition
from servigo.models.listing import Category, Listing, Profile, Provider, ServiceImage


class TestListingModels:
    """Tests for listing records."""

    def test_listing_with_complete_data(self):
        """Test Listing creation from a backend row."""
        listing = Listing.model_validate({
            "id": 42,
            "service_provider_id": "sp-1",
            "user_id": "u-1",
            "job_category_id": 7,
            "description": "Plombier disponible 7j/7",
            "location": "Sfax",
            "hourly_rate": 35,
            "business_name": "Sfax Plomberie",
            "is_active": True,
            "created_at": "2025-01-10T09:00:00+00:00",
        })

        assert listing.id == "42"
        assert listing.job_category_id == "7"
        assert listing.hourly_rate == 35.0
        assert listing.created_at.year == 2025

    def test_hourly_rate_parsing_string(self):
        """Test rate parsing from formatted strings."""
        assert Listing(id="1", hourly_rate="40 TND").hourly_rate == 40.0
        assert Listing(id="1", hourly_rate="12,5").hourly_rate == 12.5
        assert Listing(id="1", hourly_rate="sur devis").hourly_rate is None
        assert Listing(id="1", hourly_rate="").hourly_rate is None

    def test_listing_defaults(self):
        """Test that optional fields default to None and listings are active."""
        listing = Listing(id="1")

        assert listing.is_active is True
        assert listing.location is None
        assert listing.service_provider_id is None


class TestProviderModel:
    """Tests for Provider normalization."""

    def test_null_fields_normalized(self):
        """Test that nulls from the backend become the documented defaults."""
        provider = Provider.model_validate({
            "id": "sp-1",
            "business_name": None,
            "rating": None,
            "total_reviews": None,
            "is_approved": None,
        })

        assert provider.business_name == "Service Provider"
        assert provider.rating == 0.0
        assert provider.total_reviews == 0
        assert provider.is_approved is False
        assert not provider.is_rated

    def test_rating_is_clamped(self):
        """Test that ratings stay within 0-5."""
        assert Provider(id="1", rating=7.3).rating == 5.0
        assert Provider(id="1", rating=-1).rating == 0.0
        assert Provider(id="1", rating="4.6").rating == 4.6

    def test_negative_review_count_rejected(self):
        """Test that the review count must be non-negative."""
        with pytest.raises(ValidationError):
            Provider(id="1", total_reviews=-3)


class TestCategoryModel:
    """Tests for category classification parsing."""

    @pytest.mark.parametrize("raw,expected", [
        ("onsite", "onsite"),
        ("on-site", "onsite"),
        ("On Site", "onsite"),
        ("online", "online"),
        ("Online", "online"),
        ("hybrid", None),
        (None, None),
    ])
    def test_service_type_normalization(self, raw, expected):
        """Test that classification spellings map to the canonical tags."""
        assert Category(id="1", name="X", service_type=raw).service_type == expected

    def test_null_name_becomes_empty(self):
        assert Category(id="1", name=None).name == ""


class TestProfileModel:
    def test_full_name(self):
        assert Profile(first_name="Amira", last_name="Ben Salah").full_name == "Amira Ben Salah"
        assert Profile(first_name="Amira").full_name == "Amira"
        assert Profile(last_name="Ben Salah").full_name is None


class TestEnrichedListing:
    """Tests for computed display fields."""

    def test_profile_name_wins(self):
        """Test that the profile's full name is the display name."""
        enriched = EnrichedListing(
            listing=Listing(id="1", business_name="Listing Biz"),
            provider=Provider(id="p1", business_name="Provider Biz"),
            profile=Profile(first_name="Karim", last_name="Trabelsi"),
        )
        assert enriched.provider_name == "Karim Trabelsi"

    def test_business_name_fallback(self):
        """Test fallback to the provider's business name without a profile."""
        enriched = EnrichedListing(
            listing=Listing(id="1", business_name="Listing Biz"),
            provider=Provider(id="p1", business_name="Provider Biz"),
            profile=Profile(first_name=None),
        )
        assert enriched.provider_name == "Provider Biz"

    def test_category_prefers_provider(self):
        """Test that the provider's category overrides the listing's."""
        enriched = EnrichedListing(
            listing=Listing(id="1", job_category_id="listing-cat"),
            provider=Provider(id="p1", job_category_id="provider-cat"),
        )
        assert enriched.category_id == "provider-cat"

        enriched = EnrichedListing(
            listing=Listing(id="1", job_category_id="listing-cat"),
            provider=Provider(id="p1"),
        )
        assert enriched.category_id == "listing-cat"

    def test_photos(self):
        """Test photo precedence: profile, provider, then service photo."""
        enriched = EnrichedListing(
            listing=Listing(id="1"),
            provider=Provider(id="p1", profile_photo_url="provider.jpg"),
            service_photo="service.jpg",
        )
        assert enriched.provider_photo == "provider.jpg"
        assert enriched.display_photo == "provider.jpg"

        enriched = EnrichedListing(
            listing=Listing(id="1"),
            provider=Provider(id="p1"),
            service_photo="service.jpg",
        )
        assert enriched.provider_photo is None
        assert enriched.display_photo == "service.jpg"

    def test_price_label(self):
        enriched = EnrichedListing(listing=Listing(id="1", hourly_rate=30), provider=Provider(id="p1"))
        assert enriched.price_label() == "30 TND/hour"

        enriched = EnrichedListing(listing=Listing(id="1"), provider=Provider(id="p1"))
        assert enriched.price_label() is None


class TestFilterCriteria:
    """Tests for FilterCriteria."""

    def test_defaults(self):
        criteria = FilterCriteria()

        assert criteria.category == ALL
        assert criteria.location == ALL
        assert criteria.availability == frozenset()
        assert criteria.is_default

    def test_blank_means_all(self):
        """Test that empty selectors behave like 'all'."""
        criteria = FilterCriteria(category="", location=None)

        assert criteria.category == ALL
        assert criteria.location == ALL

    def test_availability_accepts_lists(self):
        criteria = FilterCriteria(availability=["verified", "verified", "licensed"])
        assert criteria.availability == frozenset({"verified", "licensed"})

    def test_unknown_availability_rejected(self):
        with pytest.raises(ValidationError):
            FilterCriteria(availability=["insured"])

    def test_reset(self):
        criteria = FilterCriteria(category="c1", location="Sousse", availability=["verified"])
        assert criteria.reset() == FilterCriteria()


class TestDetailsModels:
    """Tests for provider page models."""

    def test_review_rating_bounds(self):
        with pytest.raises(ValidationError):
            Review(id="r1", rating=6)

    def test_reviewer_name(self):
        assert Review(id="r1", rating=5, reviewer_first_name="Sami").reviewer_name == "Sami"
        assert Review(id="r1", rating=5).reviewer_name == "Anonymous"

    def test_primary_image(self):
        summary = ServiceSummary(
            listing=Listing(id="s1"),
            images=[
                ServiceImage(service_id="s1", image_url="a.jpg"),
                ServiceImage(service_id="s1", image_url="b.jpg", is_primary=True),
            ],
        )
        assert summary.primary_image == "b.jpg"

    def test_selected_service_defaults_to_first(self):
        details = ProviderDetails(
            provider=Provider(id="p1"),
            services=[ServiceSummary(listing=Listing(id="s1")), ServiceSummary(listing=Listing(id="s2"))],
        )
        assert details.selected_service.listing.id == "s1"
        assert details.display_name == "Service Provider"

    def test_partition_counts(self):
        assert Partition().counts == {"onsite": 0, "online": 0}
