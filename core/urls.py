"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("", views.generator, name="generator"),
    path("download/", views.download_chart, name="download"),
]
