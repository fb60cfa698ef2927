"""
URL configuration for the recipeshare project.

Everything under `api/` is JSON; `admin/` is the Django admin site.
"""
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path
from recipes import views

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/health/', views.health, name='health'),

    path('api/auth/register/', views.register, name='register'),
    path('api/auth/login/', views.login, name='login'),
    path('api/auth/profile/', views.profile, name='profile'),
    path('api/auth/change-password/', views.change_password, name='change_password'),

    path('api/recipes/', views.RecipeCollectionApi.as_view(), name='recipe_list_api'),
    path('api/recipes/recent/', views.recent_recipes, name='recent_recipes'),
    path('api/recipes/featured/', views.featured_recipes, name='featured_recipes'),
    path('api/recipes/<uuid:recipe_id>/', views.RecipeDetailApi.as_view(), name='recipe_detail_api'),
    path('api/recipes/<uuid:recipe_id>/like/', views.toggle_like, name='toggle_like'),
    path('api/recipes/<uuid:recipe_id>/favorite/', views.toggle_favorite, name='toggle_favorite'),
    path('api/recipes/<uuid:recipe_id>/reviews/', views.add_review, name='add_review'),
    path('api/recipes/<uuid:recipe_id>/instructions/<int:index>/', views.remove_instruction, name='remove_instruction'),

    path('api/users/my-recipes/', views.my_recipes, name='my_recipes'),
    path('api/users/favorites/', views.my_favorites, name='my_favorites'),
    path('api/users/top-chefs/', views.top_chefs, name='top_chefs'),
    path('api/users/profile/<str:username>/', views.user_profile, name='user_profile'),
    path('api/users/<int:user_id>/follow/', views.follow_user, name='follow_user'),
    path('api/users/<str:username>/recipes/', views.user_recipes, name='user_recipes'),
    path('api/users/<str:username>/favorites/', views.user_favorites, name='user_favorites'),
]

urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
