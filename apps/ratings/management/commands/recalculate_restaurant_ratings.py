from django.core.management.base import BaseCommand
from apps.restaurants.models import Restaurant
from apps.ratings.services import RatingAggregator


class Command(BaseCommand):
    help = 'Recompute Restaurant.rating from customer ratings'

    def add_arguments(self, parser):
        parser.add_argument('restaurant_ids', nargs='*', type=int, help='Restaurants to refresh (default: all)')

    def handle(self, *args, **options):
        restaurant_ids = options['restaurant_ids'] or list(Restaurant.objects.values_list('id', flat=True))
        aggregator = RatingAggregator()

        updated = 0
        for restaurant_id in restaurant_ids:
            rating = aggregator.recalculate(restaurant_id)
            if rating is None:
                self.stdout.write(f'Restaurant {restaurant_id}: no customer ratings, skipped')
            else:
                updated += 1
                self.stdout.write(f'Restaurant {restaurant_id}: {rating}')

        self.stdout.write(self.style.SUCCESS(f'Updated {updated} of {len(restaurant_ids)} restaurants'))
