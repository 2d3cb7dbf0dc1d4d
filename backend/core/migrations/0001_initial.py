import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Experience",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("role", models.CharField(max_length=255)),
                ("organization", models.CharField(max_length=255)),
                ("period", models.CharField(max_length=100)),
                ("description", models.TextField(max_length=5000)),
                ("type", models.CharField(default="Experience", max_length=50)),
            ],
            options={
                "db_table": "experiences",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Message",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("email", models.EmailField(max_length=255)),
                ("subject", models.CharField(blank=True, default="", max_length=500)),
                ("message", models.TextField(max_length=5000)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, editable=False)),
            ],
            options={
                "db_table": "messages",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="Project",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(max_length=5000)),
                ("tech_stack", models.TextField(default="[]")),
                ("image_url", models.URLField(max_length=500)),
                ("github_url", models.URLField(blank=True, max_length=500, null=True)),
                ("live_url", models.URLField(blank=True, max_length=500, null=True)),
                ("category", models.CharField(max_length=100)),
                ("problem_statement", models.TextField(blank=True, max_length=5000, null=True)),
                ("motivation", models.TextField(blank=True, max_length=5000, null=True)),
                ("system_design", models.TextField(blank=True, max_length=5000, null=True)),
                ("challenges", models.TextField(blank=True, max_length=5000, null=True)),
                ("learnings", models.TextField(blank=True, max_length=5000, null=True)),
            ],
            options={
                "db_table": "projects",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Skill",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("category", models.CharField(max_length=100)),
                ("icon", models.CharField(default="Code", max_length=100)),
            ],
            options={
                "db_table": "skills",
                "ordering": ["id"],
            },
        ),
    ]
