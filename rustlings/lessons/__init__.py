"""Small Python lessons on parsing, errors, records, traits, collections and iterators."""