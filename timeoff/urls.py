from rest_framework.routers import DefaultRouter

from .views import LeavePolicyViewSet, LeaveTypeViewSet

router = DefaultRouter()
router.register(r"leave-types", LeaveTypeViewSet, basename="leave-type")
router.register(r"leave-policies", LeavePolicyViewSet, basename="leave-policy")

urlpatterns = router.urls
