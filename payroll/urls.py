from rest_framework.routers import DefaultRouter

from .views import SalaryComponentViewSet, SalaryPolicyViewSet

router = DefaultRouter()
router.register(r"salary-components", SalaryComponentViewSet, basename="salary-component")
router.register(r"salary-policies", SalaryPolicyViewSet, basename="salary-policy")

urlpatterns = router.urls
