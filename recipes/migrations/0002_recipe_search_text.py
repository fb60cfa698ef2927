from django.db import migrations, models

from recipes.models.recipe import search_text_for


def fill_search_text(apps, schema_editor):
    Recipe = apps.get_model("recipes", "Recipe")
    for recipe in Recipe.objects.all().iterator():
        recipe.search_text = search_text_for(recipe.title, recipe.description, recipe.cuisine, recipe.tags)
        recipe.save(update_fields=["search_text"])


class Migration(migrations.Migration):

    dependencies = [
        ("recipes", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="recipe",
            name="search_text",
            field=models.TextField(blank=True, default="", editable=False),
        ),
        migrations.RunPython(fill_search_text, migrations.RunPython.noop),
    ]
