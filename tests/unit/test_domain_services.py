"""Unit tests for disease analysis, weather, dashboard, crop and community services."""

import httpx
import pytest

from krishi.core.exceptions import (
    EntityNotFoundError,
    InvalidRequestError,
    MalformedResponseError,
    UpstreamError,
)
from krishi.schemas.entities import CommunityPostCreate, Crop
from krishi.services.community_service import CommunityService
from krishi.services.crop_service import CropService
from krishi.services.dashboard_service import DashboardService, crop_health_score
from krishi.services.disease_service import DiseaseAnalysisService, detection_from_analysis
from krishi.services.llm.prompts import DISEASE_ANALYSIS_SCHEMA, WEATHER_SNAPSHOT_SCHEMA
from krishi.services.tip_service import TipService
from krishi.services.weather_service import WeatherService
from tests.utils import (
    INVOKE_PATH,
    PNG_BYTES,
    UPLOAD_PATH,
    disease_analysis_payload,
    raising,
    weather_snapshot_payload,
)

LEAF_URL = "https://files.test/uploads/leaf.png"


@pytest.fixture
def disease_service(uploader, generator, stores) -> DiseaseAnalysisService:
    return DiseaseAnalysisService(uploader, generator, stores.detections)


@pytest.mark.unit
@pytest.mark.asyncio
class TestDiseaseAnalysisService:
    async def test_analyze_uploads_then_generates_then_stores(
        self, disease_service, fake_service, stores
    ):
        fake_service.on("POST", UPLOAD_PATH, json={"file_url": LEAF_URL})
        fake_service.on("POST", INVOKE_PATH, json=disease_analysis_payload())

        record = await disease_service.analyze(PNG_BYTES, "leaf.png", "image/png")

        assert [r.url.path for r in fake_service.requests] == [UPLOAD_PATH, INVOKE_PATH]
        body = fake_service.last_json()
        assert body["file_urls"] == [LEAF_URL]
        assert body["response_json_schema"] == DISEASE_ANALYSIS_SCHEMA
        assert body["add_context_from_internet"] is False

        assert record.image_url == LEAF_URL
        assert record.detected_disease == "Early Blight"
        assert record.severity == "moderate"
        assert record.confidence_score == 87.5
        assert record.is_healthy is False
        assert await stores.detections.get(record.id) == record

    @pytest.mark.parametrize("content_type", ["application/pdf", "text/plain"])
    async def test_non_image_is_rejected_before_upload(
        self, disease_service, fake_service, content_type
    ):
        with pytest.raises(InvalidRequestError):
            await disease_service.analyze(b"%PDF-1.4", "report.pdf", content_type)

        assert fake_service.calls == 0

    async def test_empty_image_is_rejected(self, disease_service, fake_service):
        with pytest.raises(InvalidRequestError):
            await disease_service.analyze(b"", "leaf.png", "image/png")

        assert fake_service.calls == 0

    async def test_upload_failure_skips_analysis(self, disease_service, fake_service, stores):
        fake_service.on("POST", UPLOAD_PATH, status_code=500)

        with pytest.raises(UpstreamError):
            await disease_service.analyze(PNG_BYTES, "leaf.png", "image/png")

        assert fake_service.calls == 1
        assert await stores.detections.list() == []

    async def test_non_object_analysis_is_malformed(self, disease_service, fake_service, stores):
        fake_service.on("POST", UPLOAD_PATH, json={"file_url": LEAF_URL})
        fake_service.on("POST", INVOKE_PATH, json=["Early Blight"])

        with pytest.raises(MalformedResponseError):
            await disease_service.analyze(PNG_BYTES, "leaf.png", "image/png")

        assert await stores.detections.list() == []

    def test_untrusted_fields_are_dropped(self):
        create = detection_from_analysis(
            LEAF_URL,
            {
                "detected_disease": "",
                "plant_type": 7,
                "confidence_score": 150,
                "severity": "extreme",
                "is_healthy": "no",
                "symptoms": "spots",
                "prevention_tips": ["rotate", 3],
            },
        )

        assert create.detected_disease is None
        assert create.plant_type is None
        assert create.confidence_score is None
        assert create.severity is None
        assert create.is_healthy is None
        assert create.symptoms == []
        assert create.treatment_recommendations == []
        assert create.prevention_tips == ["rotate", "3"]

    def test_boolean_confidence_is_dropped(self):
        assert detection_from_analysis(LEAF_URL, {"confidence_score": True}).confidence_score is None


@pytest.mark.unit
@pytest.mark.asyncio
class TestWeatherService:
    async def test_current_uses_internet_context(self, generator, fake_service):
        fake_service.on("POST", INVOKE_PATH, json=weather_snapshot_payload())

        snapshot = await WeatherService(generator).current("Ludhiana")

        body = fake_service.last_json()
        assert body["add_context_from_internet"] is True
        assert body["response_json_schema"] == WEATHER_SNAPSHOT_SCHEMA
        assert body["prompt"].endswith("Location: Ludhiana")
        assert snapshot.temperature == 28
        assert snapshot.condition == "Partly Cloudy"

    async def test_current_ignores_unknown_fields(self, generator, fake_service):
        fake_service.on("POST", INVOKE_PATH, json={"condition": "Sunny", "moon_phase": "full"})

        snapshot = await WeatherService(generator).current()

        assert snapshot.condition == "Sunny"
        assert snapshot.temperature is None
        assert "Location:" not in fake_service.last_json()["prompt"]

    async def test_forecast_treats_null_sections_as_empty(self, generator, fake_service):
        fake_service.on(
            "POST",
            INVOKE_PATH,
            json={
                "current": {"temperature": 31, "condition": "Hot"},
                "forecast": [{"day": "Mon", "high_temp": 33, "low_temp": 24}],
                "alerts": None,
                "best_times": None,
            },
        )

        report = await WeatherService(generator).forecast()

        assert report.current.temperature == 31
        assert report.forecast[0].high_temp == 33
        assert report.alerts == []
        assert report.best_times.watering is None
        assert report.risks.frost_risk is None

    async def test_non_object_answer_is_malformed(self, generator, fake_service):
        fake_service.on("POST", INVOKE_PATH, json="It is sunny")

        with pytest.raises(MalformedResponseError):
            await WeatherService(generator).current()

    async def test_unusable_field_type_is_malformed(self, generator, fake_service):
        fake_service.on("POST", INVOKE_PATH, json={"temperature": "very hot"})

        with pytest.raises(MalformedResponseError):
            await WeatherService(generator).current()


@pytest.mark.unit
@pytest.mark.asyncio
class TestDashboardService:
    async def test_summary_collects_limited_lists(self, seeded_stores, generator, fake_service):
        fake_service.on("POST", INVOKE_PATH, json=weather_snapshot_payload())
        for i in range(6):
            await seeded_stores.crops.create({"name": f"Plot {i}", "growth_stage": "harvest_ready"})

        summary = await DashboardService(seeded_stores, WeatherService(generator)).summary("Punjab")

        assert len(summary.crops) == 5
        assert all(c.status == "active" for c in summary.crops)
        assert len(summary.recent_detections) == 2
        assert len(summary.featured_tips) == 4
        assert summary.stats.total_crops == 5
        assert summary.stats.active_crops == 5
        assert summary.stats.ready_to_harvest == 5
        assert summary.stats.recent_detections == 2
        assert summary.stats.crop_health_score == 100
        assert summary.weather.temperature == 28
        assert summary.weather_error is None

    async def test_weather_failure_does_not_fail_dashboard(
        self, seeded_stores, generator, fake_service
    ):
        fake_service.on("POST", INVOKE_PATH, raising(httpx.ConnectError("offline")))

        summary = await DashboardService(seeded_stores, WeatherService(generator)).summary()

        assert summary.weather is None
        assert summary.weather_error == "NetworkError"
        assert len(summary.crops) == 2

    async def test_empty_stores(self, stores, generator, fake_service):
        fake_service.on("POST", INVOKE_PATH, status_code=502)

        summary = await DashboardService(stores, WeatherService(generator)).summary()

        assert summary.crops == []
        assert summary.stats.total_crops == 0
        assert summary.stats.crop_health_score == 0
        assert summary.weather_error == "UpstreamError"

    async def test_health_score_counts_crops_past_seedling(self, seeded_stores, generator, fake_service):
        fake_service.on("POST", INVOKE_PATH, json=weather_snapshot_payload())
        await seeded_stores.crops.create({"name": "Chillies", "growth_stage": "seedling"})

        summary = await DashboardService(seeded_stores, WeatherService(generator)).summary()

        assert summary.stats.total_crops == 3
        assert summary.stats.crop_health_score == 67


@pytest.mark.unit
@pytest.mark.parametrize(
    "stages, score",
    [
        ([], 0),
        (["seedling"], 0),
        (["seedling", "flowering"], 50),
        (["seedling"] * 7 + ["fruiting"], 13),
        (["harvest_ready", "vegetative"], 100),
    ],
)
def test_crop_health_score(stages, score):
    crops = [
        Crop(id=str(i), created_date="2024-01-01T00:00:00Z", name="Plot", growth_stage=stage)
        for i, stage in enumerate(stages)
    ]

    assert crop_health_score(crops) == score


@pytest.mark.unit
@pytest.mark.asyncio
class TestCropService:
    async def test_change_status(self, seeded_stores):
        service = CropService(seeded_stores.crops)

        crop = await service.change_status("1", "harvested")

        assert crop.status == "harvested"
        assert crop.name == "Tomatoes"
        active = await seeded_stores.crops.filter({"status": "active"})
        assert [c.id for c in active] == ["2"]

    async def test_change_status_of_missing_crop(self, stores):
        with pytest.raises(EntityNotFoundError):
            await CropService(stores.crops).change_status("nope", "inactive")


@pytest.mark.unit
@pytest.mark.asyncio
class TestCommunityService:
    async def test_create_post_defaults(self, stores):
        service = CommunityService(stores.posts)

        post = await service.create_post(
            CommunityPostCreate(title="Yellow leaves?", content="Help", tags=" wheat, ,urea "),
            author="Demo Farmer",
        )

        assert post.tags == ["wheat", "urea"]
        assert post.created_by == "Demo Farmer"
        assert post.likes_count == 0
        assert post.replies_count == 0
        assert post.is_resolved is False

    async def test_like_increments(self, seeded_stores):
        service = CommunityService(seeded_stores.posts)
        before = (await seeded_stores.posts.get("1")).likes_count

        await service.like("1")
        post = await service.like("1")

        assert post.likes_count == before + 2

    async def test_resolve(self, seeded_stores):
        post = await CommunityService(seeded_stores.posts).resolve("1")

        assert post.is_resolved is True

    async def test_like_missing_post(self, stores):
        with pytest.raises(EntityNotFoundError):
            await CommunityService(stores.posts).like("nope")

    async def test_browse_searches_title_content_and_tags(self, seeded_stores):
        service = CommunityService(seeded_stores.posts)

        assert [p.id for p in await service.browse(q="NEEM")] == ["2"]
        assert [p.id for p in await service.browse(q="punjab")] == ["1"]
        assert [p.id for p in await service.browse(q="  ")] == ["1", "2"]
        assert await service.browse(q="rice") == []

    async def test_browse_combines_category_and_search(self, seeded_stores):
        service = CommunityService(seeded_stores.posts)

        assert await service.browse(category="question", q="neem") == []
        assert [p.id for p in await service.browse(category="tip", q="organic")] == ["2"]

    async def test_browse_limit_applies_after_search(self, seeded_stores):
        service = CommunityService(seeded_stores.posts)

        posts = await service.browse(q="pest", limit=1)

        assert [p.id for p in posts] == ["2"]

    async def test_stats_cover_whole_board(self, seeded_stores):
        stats = await CommunityService(seeded_stores.posts).stats()

        assert stats.total_posts == 2
        assert stats.questions == 1
        assert stats.resolved == 1
        assert stats.total_likes == 13

    async def test_stats_on_empty_board(self, stores):
        stats = await CommunityService(stores.posts).stats()

        assert stats.model_dump() == {
            "total_posts": 0,
            "questions": 0,
            "resolved": 0,
            "total_likes": 0,
        }


@pytest.mark.unit
@pytest.mark.asyncio
class TestTipService:
    async def test_season_includes_year_round_tips(self, seeded_stores):
        service = TipService(seeded_stores.tips)

        assert {t.id for t in await service.browse(season="spring")} == {"1", "2", "3", "4"}
        assert {t.id for t in await service.browse(season="winter")} == {"1", "3", "4"}
        assert {t.id for t in await service.browse(season="all_seasons")} == {"1", "3", "4"}

    async def test_search_matches_crop_types_case_insensitively(self, seeded_stores):
        service = TipService(seeded_stores.tips)

        assert {t.id for t in await service.browse(q="TOMATOES")} == {"1", "2"}
        assert [t.id for t in await service.browse(q="drip")] == ["3"]
        assert {t.id for t in await service.browse(q="Peppers")} == {"1", "2"}

    async def test_filters_combine(self, seeded_stores):
        service = TipService(seeded_stores.tips)

        tips = await service.browse(difficulty_level="intermediate", season="winter", q="water")

        assert [t.id for t in tips] == ["3"]

    async def test_limit_applies_after_filtering(self, seeded_stores):
        service = TipService(seeded_stores.tips)

        tips = await service.browse(season="winter", order_by="title", limit=2)

        assert [t.title for t in tips] == [
            "Composting for Nutrient-Rich Soil",
            "Drip Irrigation System Setup",
        ]
