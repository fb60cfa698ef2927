from rest_framework import serializers

from recipes.models import Recipe, User


class AuthorSerializer(serializers.ModelSerializer):
    """Public identity of a user, as embedded in recipes and reviews."""
    avatar = serializers.CharField(source="avatar_url", read_only=True)

    class Meta:
        model = User
        fields = ["id", "username", "first_name", "last_name", "avatar"]
        read_only_fields = fields


class ProfileSerializer(AuthorSerializer):
    """The signed-in user's own account."""

    class Meta(AuthorSerializer.Meta):
        fields = AuthorSerializer.Meta.fields + ["email", "bio", "date_joined"]
        read_only_fields = fields


class PublicProfileSerializer(serializers.Serializer):
    """Profile page payload built by UserDirectoryService.profile."""
    user = ProfileSerializer(read_only=True)
    followers = AuthorSerializer(many=True, read_only=True)
    following = AuthorSerializer(many=True, read_only=True)
    is_following = serializers.BooleanField(read_only=True)
    public_recipe_count = serializers.IntegerField(read_only=True)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        # email stays private to its owner
        data["user"].pop("email", None)
        return data


class TopChefSerializer(AuthorSerializer):
    public_recipe_count = serializers.IntegerField(read_only=True)
    likes_received = serializers.IntegerField(read_only=True)

    class Meta(AuthorSerializer.Meta):
        fields = AuthorSerializer.Meta.fields + ["bio", "public_recipe_count", "likes_received"]
        read_only_fields = fields


class RecipeSummarySerializer(serializers.ModelSerializer):
    """Card-sized view of a recipe used in lists and search results."""
    author = AuthorSerializer(read_only=True)
    total_time = serializers.IntegerField(read_only=True)

    class Meta:
        model = Recipe
        fields = [
            "id",
            "author",
            "title",
            "description",
            "image",
            "prep_time",
            "cook_time",
            "total_time",
            "servings",
            "difficulty",
            "cuisine",
            "category",
            "tags",
            "average_rating",
            "total_reviews",
            "likes_count",
            "is_public",
            "is_featured",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class RecipeDetailSerializer(RecipeSummarySerializer):
    """
    Full recipe with ingredients, instructions and populated reviews.

    Reviewers are resolved from the `reviewers` context map (id -> User) so a
    page of reviews costs one query. Reviews whose author no longer exists
    keep a null `user`.
    """
    reviews = serializers.SerializerMethodField()
    is_liked = serializers.SerializerMethodField()
    is_favorite = serializers.SerializerMethodField()

    class Meta(RecipeSummarySerializer.Meta):
        fields = RecipeSummarySerializer.Meta.fields + [
            "ingredients",
            "instructions",
            "reviews",
            "is_liked",
            "is_favorite",
        ]
        read_only_fields = fields

    def _viewer(self):
        request = self.context.get("request")
        user = getattr(request, "user", None)
        return user if user is not None and user.is_authenticated else None

    def get_reviews(self, obj):
        reviewers = self.context.get("reviewers", {})
        reviews = []
        for review in obj.reviews:
            reviewer = reviewers.get(review.get("user"))
            reviews.append({
                "user": AuthorSerializer(reviewer).data if reviewer else None,
                "rating": review.get("rating"),
                "comment": review.get("comment", ""),
                "created_at": review.get("created_at"),
            })
        return reviews

    def get_is_liked(self, obj):
        viewer = self._viewer()
        return bool(viewer and obj.has_liked(viewer.pk))

    def get_is_favorite(self, obj):
        viewer = self._viewer()
        return bool(viewer and viewer.has_favorited(obj))
