import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="VOD",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("stream_date", models.DateField(db_index=True)),
                ("description", models.TextField(blank=True, default="")),
            ],
            options={
                "verbose_name": "VOD",
                "verbose_name_plural": "VODs",
                "ordering": ["-stream_date", "-id"],
            },
        ),
        migrations.CreateModel(
            name="VODPiece",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("position", models.PositiveIntegerField(help_text="Zero-based order of the piece within its VOD.")),
                ("mp4_url", models.CharField(max_length=2048)),
                ("json_url", models.CharField(blank=True, help_text="Optional metadata URL; empty input is stored as NULL.", max_length=2048, null=True)),
                ("vod", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="pieces", to="vods_app.vod")),
            ],
            options={
                "verbose_name": "VOD piece",
                "ordering": ["position"],
            },
        ),
        migrations.AddConstraint(
            model_name="vodpiece",
            constraint=models.UniqueConstraint(fields=("vod", "position"), name="unique_piece_position_per_vod"),
        ),
    ]
