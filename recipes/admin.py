from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.utils.html import format_html
from recipes.models.user import User
from recipes.models.recipe import Recipe
from recipes.models.followers import Follower


@admin.register(User)
class RecipeShareUserAdmin(UserAdmin):
    """User admin with the profile fields shown on recipe pages."""
    list_display = ('username', 'email', 'first_name', 'last_name', 'recipe_count', 'is_staff')
    fieldsets = UserAdmin.fieldsets + (
        ('Profile', {'fields': ('bio', 'avatar', 'favorites')}),
    )
    filter_horizontal = UserAdmin.filter_horizontal + ('favorites',)

    def recipe_count(self, obj):
        """Number of recipes authored."""
        return obj.recipes.count()
    recipe_count.short_description = "Recipes"


@admin.register(Recipe)
class RecipeAdmin(admin.ModelAdmin):
    """Admin configuration for recipes with featuring actions."""
    list_display = ('title', 'author', 'category', 'rating_display', 'likes_count', 'is_public', 'is_featured', 'created_at')
    list_filter = ('category', 'difficulty', 'is_public', 'is_featured', 'created_at')
    search_fields = ('title', 'description', 'cuisine', 'author__username')
    readonly_fields = ('average_rating', 'total_reviews', 'likes_count', 'created_at', 'updated_at')
    actions = ['feature_recipes', 'unfeature_recipes']

    def rating_display(self, obj):
        """Average rating with the number of reviews behind it."""
        if not obj.total_reviews:
            return "-"
        return format_html('{} <span style="color:#888;">({})</span>', f"{obj.average_rating:.1f}", obj.total_reviews)
    rating_display.short_description = "Rating"

    @admin.action(description='Feature selected recipes')
    def feature_recipes(self, request, queryset):
        queryset.update(is_featured=True)

    @admin.action(description='Stop featuring selected recipes')
    def unfeature_recipes(self, request, queryset):
        queryset.update(is_featured=False)


@admin.register(Follower)
class FollowerAdmin(admin.ModelAdmin):
    list_display = ('follower', 'author', 'created_at')
    search_fields = ('follower__username', 'author__username')
