from django.urls import path

from onboarding.views import UserProfileStepView


app_name = "onboarding"

urlpatterns = [
    path("user-profile/", UserProfileStepView.as_view(), name="user-profile"),
]
