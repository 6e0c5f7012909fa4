from django.urls import path

from .views import (
    HookListView,
    TimelineView,
    fetch_transcript,
    generate_from_picks,
    generate_script,
)

urlpatterns = [
    path("generate/", generate_script, name="generate_script"),
    path("transcript/", fetch_transcript, name="fetch_transcript"),
    path("timeline/", TimelineView.as_view(), name="timeline"),
    path("generate-from-picks/", generate_from_picks, name="generate_from_picks"),
    path("hooks/", HookListView.as_view(), name="hooks"),
]
