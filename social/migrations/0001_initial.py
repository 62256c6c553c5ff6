import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
            ],
            options={
                "db_table": "users",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Activity",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("activity_type", models.CharField(choices=[("follow", "Follow"), ("unfollow", "Unfollow"), ("blog", "Blog"), ("comment", "Comment")], db_column="type", max_length=20)),
                ("content", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="activities", to="social.user")),
            ],
            options={
                "db_table": "activities",
                "ordering": ["-created_at", "-id"],
                "verbose_name_plural": "activities",
            },
        ),
        migrations.CreateModel(
            name="Follow",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("follower", models.ForeignKey(db_column="follower_id", on_delete=django.db.models.deletion.CASCADE, related_name="following", to="social.user")),
                ("followee", models.ForeignKey(db_column="followee_id", on_delete=django.db.models.deletion.CASCADE, related_name="followers", to="social.user")),
            ],
            options={
                "db_table": "follows",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["follower"], name="idx_follows_follower"),
                    models.Index(fields=["followee"], name="idx_follows_followee"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("follower", "followee"), name="uniq_follows_follower_followee"),
                    models.CheckConstraint(condition=models.Q(("follower", models.F("followee")), _negated=True), name="chk_follows_not_self"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Notification",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("content", models.TextField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("activity", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="notifications", to="social.activity")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="notifications", to="social.user")),
            ],
            options={
                "db_table": "notifications",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["user", "-created_at"], name="idx_notifications_user_recent"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("user", "activity"), name="uniq_notifications_user_activity"),
                ],
            },
        ),
    ]
