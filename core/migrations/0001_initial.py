from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Station',
            fields=[
                ('created_at', models.IntegerField(blank=True, default=None, help_text='UTC Unix timestamp when created', null=True)),
                ('id', models.AutoField(primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
            ],
            options={
                'db_table': 'stations',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='AuditLog',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('action', models.CharField(choices=[('CREATE', 'Create'), ('DELETE', 'Delete')], max_length=20)),
                ('resource_type', models.CharField(max_length=50)),
                ('resource_id', models.CharField(blank=True, default='', max_length=36)),
                ('description', models.TextField(blank=True, default='')),
                ('ip_address', models.GenericIPAddressField(blank=True, null=True)),
                ('user_agent', models.TextField(blank=True, default='')),
                ('extra_data', models.JSONField(blank=True, null=True)),
                ('timestamp', models.IntegerField(db_index=True)),
            ],
            options={
                'db_table': 'audit_logs',
                'ordering': ['-timestamp', '-id'],
                'indexes': [models.Index(fields=['resource_type', 'resource_id'], name='idx_audit_resource')],
            },
        ),
    ]
